"""
Global test configuration fixtures for proto-i18n tests.

This module provides sample .proto sources written to temporary
directories and a factory for GeneratorConfig instances pointing at them.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from proto_i18n.config.schema import GeneratorConfig


ERRORS_PROTO = """\
syntax = "proto3";

package xerr;

enum CodeError {
  OK = 0;
  INVALID_ARGUMENT = 1;
  NOT_FOUND = 2;
}

enum UserStatus {
  ACTIVE = 0;
  INACTIVE = 1;
}
"""

VALIDATION_PROTO = """\
syntax = "proto3";

package user;

message CreateUserRequest {
  string name = 1 [(buf.validate.field).cel = {
    id: "invalid_input"
    message: "must not be empty"
    expression: "this.size() > 0"
  }];
  string email = 2 [(buf.validate.field).cel = {
    id: "invalid_email"
    expression: "this.isEmail()"
  }];
}
"""


@pytest.fixture
def proto_dir(tmp_path: Path) -> Path:
    """
    Create a directory with two .proto files and one unrelated file.

    Returns:
        Path: Directory containing ``errors.proto`` and ``user/user.proto``
    """
    root = tmp_path / "proto"
    (root / "user").mkdir(parents=True)
    _ = (root / "errors.proto").write_text(ERRORS_PROTO, encoding="utf-8")
    _ = (root / "user" / "user.proto").write_text(VALIDATION_PROTO, encoding="utf-8")
    _ = (root / "README.md").write_text("# not a proto file", encoding="utf-8")
    return root


@pytest.fixture
def make_config(
    proto_dir: Path, tmp_path: Path
) -> Callable[..., GeneratorConfig]:
    """
    Factory for configurations that read from ``proto_dir``.

    Keyword arguments override individual fields.
    """

    def _make(**overrides: object) -> GeneratorConfig:
        values: dict[str, object] = {
            "proto_pattern": proto_dir / "errors.proto",
            "output_dir": tmp_path / "i18n",
            "languages": ["en", "zh"],
        }
        values.update(overrides)
        return GeneratorConfig.model_validate(values)

    return _make
