"""Build the comment block placed at the top of every generated file.

Layout:

  //------------------------------
  // <auto-generated>
  //     Generator: <profile.generator>
  //     Mode: <profile.mode>          (only when a mode is set)
  // </auto-generated>
  //------------------------------
  // <title>                         (each metadata line only when set)
  // <description>
  // Base URL: <baseUrl>
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import Definition, Profile, parse_definition, parse_profile

BORDER = "//------------------------------"
OPEN_MARKER = "// <auto-generated>"
CLOSE_MARKER = "// </auto-generated>"


def build_header(
    profile: Profile | Mapping[str, Any],
    definition: Definition | Mapping[str, Any] | None,
) -> list[str]:
    """Return the header lines for the given profile and definition."""
    profile = parse_profile(profile)
    definition = parse_definition(definition)

    header = [
        BORDER,
        OPEN_MARKER,
        f"//     Generator: {profile.generator}",
    ]
    if profile.mode:
        header.append(f"//     Mode: {profile.mode}")
    header.extend([CLOSE_MARKER, BORDER])

    if definition and definition.metadata:
        metadata = definition.metadata
        if metadata.title:
            header.append(f"// {metadata.title}")
        if metadata.description:
            header.append(f"// {metadata.description}")
        if metadata.base_url:
            header.append(f"// Base URL: {metadata.base_url}")

    return header
