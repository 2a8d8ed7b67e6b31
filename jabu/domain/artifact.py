"""
Artifact identity for jabu.

An artifact is identified by the triple (author, artifact_id, version) and
written as ``author:artifact_id:version``.
"""

from dataclasses import dataclass


SEPARATOR = ":"


class ArtifactSpecError(ValueError):
    """Raised when a string is not a valid ``author:artifact_id:version``."""

    def __init__(self, value: str):
        super().__init__(f"Couldn't parse artifact specification '{value}'")
        self.value = value


@dataclass(frozen=True)
class ArtifactSpec:
    """
    Identity triple of a versioned artifact.

    Example:
        spec = ArtifactSpec.parse("me.user:registry:0.0.1")
        spec.version        # "0.0.1"
        str(spec)           # "me.user:registry:0.0.1"
    """
    author: str
    artifact_id: str
    version: str

    @classmethod
    def parse(cls, value: str) -> 'ArtifactSpec':
        """
        Parse the canonical textual form.

        The split stops after the second separator, so any further colons
        belong to the version.

        Raises:
            ArtifactSpecError: if fewer than three fields are present
        """
        fields = value.split(SEPARATOR, 2)
        if len(fields) < 3:
            raise ArtifactSpecError(value)
        return cls(author=fields[0], artifact_id=fields[1], version=fields[2])

    def format(self) -> str:
        """Canonical ``author:artifact_id:version`` string."""
        return SEPARATOR.join((self.author, self.artifact_id, self.version))

    def __str__(self) -> str:
        return self.format()

    def to_dict(self):
        return {
            'author': self.author,
            'artifact_id': self.artifact_id,
            'version': self.version,
        }


def parse_artifact_spec(value: str) -> ArtifactSpec:
    """Shortcut for :meth:`ArtifactSpec.parse`."""
    return ArtifactSpec.parse(value)


def format_artifact_spec(spec: ArtifactSpec) -> str:
    """Shortcut for :meth:`ArtifactSpec.format`."""
    return spec.format()
