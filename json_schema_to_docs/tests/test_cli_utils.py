#!/usr/bin/env python3

import click
import pytest
from click.testing import CliRunner

from json_schema_to_docs.cli_utils import reconstruct_command_line
from json_schema_to_docs.json_schema_to_docs import json_schema_to_docs


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Test command reconstruction without active Click context (fallback)"""
        result = reconstruct_command_line(json_schema_to_docs)
        assert result == "json_schema_to_docs"

    def test_reconstruct_command_line_inside_context(self, tmp_path):
        """Test that arguments come first, then non-default options; paths are shown by name"""
        schema_file = tmp_path / "schemas.json"
        schema_file.write_text("[]")
        captured = []

        @click.command()
        @click.option("--name", "-n", default=None)
        @click.option("--verbose", "-v", is_flag=True, default=False)
        @click.option("--strict", is_flag=True, default=False)
        @click.argument("path", type=click.Path(exists=True, resolve_path=True))
        def command(name, verbose, strict, path):
            captured.append(reconstruct_command_line(command))

        result = CliRunner().invoke(command, [str(schema_file), "-n", "demo", "--strict"])

        assert result.exit_code == 0, result.output
        assert captured == ["json_schema_to_docs schemas.json --name demo --strict"]


if __name__ == "__main__":
    pytest.main([__file__])
