"""
meshbuckets CLI - Command-line interface for classifying model geometry
"""

import click
import json
import logging
import sys
from pathlib import Path
from meshbuckets.exceptions import MeshBucketsError
from meshbuckets.io.obj_exporter import export_obj
from meshbuckets.loader import load_geometry_file
from meshbuckets.schema.geometry_model import BUCKET_NAMES
from meshbuckets.schema.tables import load_name_tables


@click.group()
@click.version_option()
def cli():
    """
    meshbuckets - Split scene geometry into visible, collision and pick buckets.

    Examples:
        meshbuckets classify house.scene.json
        meshbuckets export house.scene.json collidee house_collidee.obj
    """
    pass


def _setup(verbose, tables_path):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    return load_name_tables(tables_path)


def _fail(message, verbose=False):
    click.secho(message, fg='red', err=True)
    if verbose:
        import traceback
        traceback.print_exc()
    sys.exit(1)


@cli.command()
@click.argument('scene_path')
@click.option('-o', '--output', default=None, help='Write the summary as JSON to this path')
@click.option('--tables', 'tables_path', default=None, help='JSON file overriding the node name tables')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def classify(scene_path, output, tables_path, verbose):
    """
    Classify a scene and report its geometry buckets.

    Examples:
        meshbuckets classify keep.scene.json
        meshbuckets classify keep.scene.json -o keep.summary.json --tables tables.json
    """
    try:
        tables = _setup(verbose, tables_path)
        model = load_geometry_file(scene_path, tables=tables)
        summary = model.summary()

        click.echo(f"Model: {model.name}")
        click.echo(f"  Root switch: {'yes' if model.has_root_switch else 'no'}")
        click.echo(f"  Multiple roots: {'yes' if model.has_multiple_root else 'no'}")
        for bucket in ('visible', 'collidee', 'pickee'):
            counts = summary[bucket]
            click.echo(f"  {bucket}: {counts['triangles']} triangles, {counts['vertices']} vertices")
        for label, key in (('door', 'door_collidee'), ('climb', 'climb_collidee')):
            for feature, counts in summary[key].items():
                click.echo(f"  {label} {feature}: {counts['triangles']} triangles")

        if model.warnings:
            click.secho(f"{len(model.warnings)} warning(s):", fg='yellow')
            for warning in model.warnings:
                click.secho(f"  - {warning}", fg='yellow')

        if output:
            with open(output, 'w') as f:
                json.dump(summary, f, indent=2)
            click.secho(f"✓ Summary saved to {output}", fg='green')

    except FileNotFoundError as e:
        _fail(f"Error: {e}")
    except (MeshBucketsError, ValueError) as e:
        _fail(f"Error: {e}")
    except Exception as e:
        _fail(f"Unexpected error: {e}", verbose)


@cli.command()
@click.argument('scene_path')
@click.argument('bucket', type=click.Choice(BUCKET_NAMES, case_sensitive=False))
@click.argument('output_path')
@click.option('--feature', default=None, help='Door or climb node name (required for door/climb buckets)')
@click.option('--tables', 'tables_path', default=None, help='JSON file overriding the node name tables')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def export(scene_path, bucket, output_path, feature, tables_path, verbose):
    """
    Export one geometry bucket as a Wavefront OBJ file.

    Examples:
        meshbuckets export keep.scene.json visible keep.obj
        meshbuckets export keep.scene.json door keep_door.obj --feature Door_Main
    """
    try:
        tables = _setup(verbose, tables_path)
        model = load_geometry_file(scene_path, tables=tables)
        buffer = model.bucket(bucket, feature)

        object_name = f"{Path(scene_path).stem}_{feature or bucket}"
        with open(output_path, 'w') as f:
            f.write(export_obj(buffer, object_name=object_name))

        if buffer.is_empty:
            click.secho(f"Warning: {bucket} bucket is empty", fg='yellow')
        click.secho(f"✓ Success! Exported {buffer.triangle_count} triangles to {output_path}", fg='green')

    except FileNotFoundError as e:
        _fail(f"Error: {e}")
    except (MeshBucketsError, ValueError) as e:
        _fail(f"Error: {e}")
    except Exception as e:
        _fail(f"Unexpected error: {e}", verbose)


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
