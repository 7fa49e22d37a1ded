"""Tests for aws/paths.py."""

import pytest
from ssmconfig.aws.paths import build_path
from ssmconfig.aws.properties import AwsParameterStoreProperties


class TestBuildPath:
    """Tests for build_path."""

    def test_defaults(self):
        """Uses "/" for both prefix and separator by default."""
        properties = AwsParameterStoreProperties()
        assert build_path(properties, "app", "default") == "/app/default/"

    def test_custom_separator(self):
        """Places the configured separator between application and profile."""
        properties = AwsParameterStoreProperties(profile_separator="--")
        assert build_path(properties, "app", "profile1") == "/app--profile1/"

    def test_custom_prefix(self):
        """Prepends the configured prefix verbatim."""
        properties = AwsParameterStoreProperties(path_prefix="/config/")
        assert build_path(properties, "app", "profile1") == "/config/app/profile1/"

    def test_empty_profile_keeps_segment(self):
        """An empty profile is not elided."""
        properties = AwsParameterStoreProperties()
        assert build_path(properties, "app", "") == "/app//"

    def test_blank_settings_fall_back_to_separator(self):
        """Empty prefix and separator behave as unset."""
        properties = AwsParameterStoreProperties(path_prefix="", profile_separator="")
        assert build_path(properties, "app", "dev") == "/app/dev/"

    @pytest.mark.parametrize(
        "prefix,app,separator,profile",
        [
            ("/", "orders", "/", "prod"),
            ("/config/", "orders", "_", "qa"),
            ("/a/b/", "svc.name", "::", ""),
        ],
    )
    def test_concatenation_law(self, prefix, app, separator, profile):
        """Output is prefix + app + separator + profile + "/"."""
        properties = AwsParameterStoreProperties(path_prefix=prefix, profile_separator=separator)
        assert build_path(properties, app, profile) == f"{prefix}{app}{separator}{profile}/"
