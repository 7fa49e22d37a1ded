from __future__ import annotations

from ssmconfig.aws.properties import PATH_SEPARATOR, AwsParameterStoreProperties


def build_path(properties: AwsParameterStoreProperties, application: str, profile: str) -> str:
    """
    Build the parameter store path for an application profile.

    ``prefix + application + separator + profile + "/"``. An empty profile
    still yields its (empty) segment, e.g. ``/app//``; fetching and key
    stripping both rely on this exact string.
    """
    prefix = properties.path_prefix or PATH_SEPARATOR
    separator = properties.profile_separator or PATH_SEPARATOR
    return f"{prefix}{application}{separator}{profile}{PATH_SEPARATOR}"
