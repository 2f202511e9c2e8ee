#!/usr/bin/env python3

"""Header and source file templates.

Both renderers are pure functions of a GenerationRequest. The source file
includes the header by the exact filename computed for the same request,
followed by a literal ``;`` that existing users of the tool rely on.
"""

from ...models import GenerationRequest


def render_header(request: GenerationRequest) -> str:
    """Render the header file: include guard around an empty namespace block.

    Args:
        request: Request to render

    Returns:
        Complete header file text
    """
    guard = request.header_guard
    lines = [
        f"#ifndef {guard}",
        f"#define {guard}",
        "",
        "",
        f"namespace {request.namespace_name}",
        "{",
        "",
        "",
        "}",
        "",
        "#endif",
        "",
        "",
    ]
    return "\n".join(lines)


def render_source(request: GenerationRequest) -> str:
    """Render the source file: header include and an empty namespace block."""
    lines = [
        f'#include "{request.header_file_name}";',
        "",
        f"namespace {request.namespace_name}",
        "{",
        "",
        "",
        "}",
        "",
        "",
    ]
    return "\n".join(lines)
