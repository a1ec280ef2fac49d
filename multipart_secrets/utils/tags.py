"""
Tag factory for multipart secret parts.

Provides consistent provenance tagging for parts created during redistribution.
"""

from multipart_secrets.configs.tagging import TaggingSettings


def create_tags(
    environment: str,
    settings: TaggingSettings | None = None,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Create the standard tag set for a newly created part.

    Args:
        environment: Deployment environment
        settings: Tag values (defaults loaded from the environment)
        **extra_tags: Additional tags to include, keys used verbatim

    Returns:
        Dictionary of tags
    """
    settings = settings or TaggingSettings()
    prefix = settings.prefix
    tags = {
        f"{prefix}data-classification": settings.data_classification,
        f"{prefix}compliance": settings.compliance,
        f"{prefix}env": environment,
        f"{prefix}resource": settings.resource,
        f"{prefix}feature": settings.feature,
    }
    tags.update(extra_tags)
    return tags


def merge_tags(
    base_tags: dict[str, str],
    *additional_tags: dict[str, str],
) -> dict[str, str]:
    """
    Merge multiple tag dictionaries.

    Args:
        base_tags: Base tag dictionary
        *additional_tags: Additional tag dictionaries to merge

    Returns:
        Merged tag dictionary
    """
    result = base_tags.copy()
    for tags in additional_tags:
        result.update(tags)
    return result


def to_aws_tags(tags: dict[str, str]) -> list[dict[str, str]]:
    """Convert a tag mapping to the Key/Value list used by AWS APIs."""
    return [{"Key": key, "Value": value} for key, value in sorted(tags.items())]
