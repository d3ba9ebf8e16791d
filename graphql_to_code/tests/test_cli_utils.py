#!/usr/bin/env python3

import click
import pytest

from graphql_to_code.cli_utils import parse_headers, reconstruct_command_line
from graphql_to_code.graphql_to_code import graphql_to_code


class TestParseHeaders:
    def test_parses_key_value_pairs(self):
        assert parse_headers(("API-Key: test-key", "X-Trace:abc")) == {"API-Key": "test-key", "X-Trace": "abc"}

    def test_only_first_colon_separates(self):
        assert parse_headers(["Authorization: Bearer a:b"]) == {"Authorization": "Bearer a:b"}

    def test_last_duplicate_wins(self):
        assert parse_headers(["A: 1", "A: 2"]) == {"A": "2"}

    @pytest.mark.parametrize("header", ["no-colon", ": value", "   :x"])
    def test_rejects_malformed_headers(self, header):
        with pytest.raises(click.BadParameter):
            parse_headers([header])


class TestReconstructCommandLine:
    def test_without_context(self):
        """Without an active Click context the program name is returned"""
        assert reconstruct_command_line(graphql_to_code) == "graphql_to_code"

    def test_masks_header_values(self):
        with click.Context(graphql_to_code) as ctx:
            ctx.params = {
                "schema_url": "https://api.example.com/graphql",
                "headers": ("API-Key: secret",),
                "log_level": "INFO",
            }
            result = reconstruct_command_line(graphql_to_code)

        assert result.startswith("graphql_to_code ")
        assert "--schema-url https://api.example.com/graphql" in result
        assert '--headers "API-Key: ***"' in result
        assert "secret" not in result
        assert "--log-level" not in result


if __name__ == "__main__":
    pytest.main([__file__])
