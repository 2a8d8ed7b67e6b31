"""
Argument builders for the JDK command line tools.

Each config turns into the argument list of one tool invocation with
``into_args()``; spawning is done by ``jabu.infra.run_command``.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..domain.project import JavaConfig


def _classpath(entries: Sequence) -> str:
    return os.pathsep.join(str(entry) for entry in entries)


@dataclass
class JavacConfig:
    """``javac`` invocation: sources, output dir, release and classpath."""
    sources: List[str]
    output_dir: Optional[Path] = None
    java_config: Optional[JavaConfig] = None
    classpath: List[str] = field(default_factory=list)

    def into_args(self) -> List[str]:
        args = []
        if self.output_dir is not None:
            args += ["-d", str(self.output_dir)]
        if self.java_config is not None:
            args += ["--source", str(self.java_config.source),
                     "--target", str(self.java_config.target)]
        if self.classpath:
            args += ["-cp", _classpath(self.classpath)]
        args += [str(source) for source in self.sources]
        return args


@dataclass
class JarToolConfig:
    """``jar --create`` invocation."""
    output_file: Path
    contents: Dict[str, List[str]] = field(default_factory=dict)
    manifest_location: Optional[Path] = None

    @classmethod
    def for_classes(cls, output_file: Path, classes_dir: Path) -> 'JarToolConfig':
        return cls(output_file=output_file, contents={str(classes_dir): ["."]})

    def into_args(self) -> List[str]:
        args = ["--create", "--file", str(self.output_file)]
        if self.manifest_location is not None:
            args += ["--manifest", str(self.manifest_location)]
        for base_location, targets in self.contents.items():
            args += ["-C", base_location] + list(targets)
        return args


@dataclass
class JavaToolConfig:
    """``java`` invocation of either a main class or a jar."""
    main_class: Optional[str] = None
    jar: Optional[str] = None
    classpath: List[str] = field(default_factory=list)
    arguments: List[str] = field(default_factory=list)

    def __post_init__(self):
        if (self.main_class is None) == (self.jar is None):
            raise ValueError("Exactly one of main_class or jar must be given")

    def into_args(self) -> List[str]:
        args = []
        if self.classpath:
            args += ["-cp", _classpath(self.classpath)]
        if self.jar is not None:
            args += ["-jar", self.jar]
        else:
            args.append(self.main_class)
        return args + list(self.arguments)


class JavaVisibilityLevel(Enum):
    PRIVATE = "private"
    PROTECTED = "protected"
    PUBLIC = "public"

    @classmethod
    def parse(cls, value: str) -> 'JavaVisibilityLevel':
        """Case-insensitive lookup; raises ValueError for unknown levels."""
        return cls(value.lower())


@dataclass
class JavadocToolConfig:
    sources: List[str]
    output_dir: Optional[Path] = None
    java_config: Optional[JavaConfig] = None
    visibility: JavaVisibilityLevel = JavaVisibilityLevel.PRIVATE
    classpath: List[str] = field(default_factory=list)

    def into_args(self) -> List[str]:
        args = [str(source) for source in self.sources]
        if self.output_dir is not None:
            args += ["-d", str(self.output_dir)]
        if self.java_config is not None:
            args += ["--source", str(self.java_config.source)]
        if self.classpath:
            args += ["-cp", _classpath(self.classpath)]
        args.append(f"-{self.visibility.value}")
        return args


@dataclass
class JPackageToolConfig:
    """``jpackage`` invocation producing a self-contained application."""
    input_jar: Path
    name: str
    main_class: str
    destination: Path
    output_type: Optional[str] = None

    def into_args(self) -> List[str]:
        args = [
            "--input", str(self.input_jar.parent),
            "--main-jar", self.input_jar.name,
            "--name", self.name,
            "--main-class", self.main_class,
            "--dest", str(self.destination),
        ]
        if self.output_type:
            args += ["--type", self.output_type]
        return args
