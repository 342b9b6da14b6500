"""Custom exceptions for geometry loading"""


class MeshBucketsError(Exception):
    """Base exception for meshbuckets errors"""
    pass


class InvalidSourceError(MeshBucketsError, ValueError):
    """Missing or empty model name or source content"""
    pass


class SceneDecodeError(MeshBucketsError, ValueError):
    """Scene document could not be decoded into nodes"""
    pass


class UnknownBucketError(MeshBucketsError, KeyError):
    """Requested bucket or feature does not exist"""

    def __str__(self):
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""
