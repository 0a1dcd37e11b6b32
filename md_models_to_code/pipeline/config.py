"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class BuilderPolicy(str, Enum):
    """What a builder does with required fields that were never set."""

    LENIENT = "lenient"  # Fall back to the field default
    STRICT = "strict"  # Refuse to build


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Objects and enums to ignore during generation
    ignore_classes: list[str] = field(default_factory=list)

    # Attributes to ignore globally across all objects
    global_ignore_fields: list[str] = field(default_factory=list)

    # Module name used when the model has none
    default_module_name: str = "model"

    # What builders do with required fields that were never set
    builder_policy: BuilderPolicy = BuilderPolicy.LENIENT

    # Reject field/variant names that collide after case conversion
    check_identifier_collisions: bool = False

    # Generate get_/set_ accessors on records
    add_accessors: bool = True

    # Generate a builder class per record
    add_builders: bool = True

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Use from __future__ import annotations
    use_future_annotations: bool = True

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "builder_policy":
                config.builder_policy = BuilderPolicy(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "ignore_classes": self.ignore_classes,
            "global_ignore_fields": self.global_ignore_fields,
            "default_module_name": self.default_module_name,
            "builder_policy": self.builder_policy.value,
            "check_identifier_collisions": self.check_identifier_collisions,
            "add_accessors": self.add_accessors,
            "add_builders": self.add_builders,
            "add_generation_comment": self.add_generation_comment,
            "use_future_annotations": self.use_future_annotations,
        }
