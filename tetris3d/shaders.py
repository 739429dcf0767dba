"""GLSL programs and the loader for combined vertex/fragment shader files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

VERTEX_MARKER = "// VERTEX_SHADER"
FRAGMENT_MARKER = "// FRAGMENT_SHADER"


class ShaderError(Exception):
    """A shader file could not be read or lacks one of its two stages."""


@dataclass(frozen=True)
class ShaderSource:
    vertex: str
    fragment: str


def _find_marker(lines: List[str], marker: str) -> Optional[int]:
    return next(
        (i for i, line in enumerate(lines) if line.rstrip("\r\n") == marker), None
    )


def _section(lines: List[str], start: Optional[int], other: Optional[int]) -> str:
    if start is None:
        return ""
    end = other if other is not None and other > start else len(lines)
    return "".join(lines[start:end])


def split_shader_source(text: str) -> ShaderSource:
    """Split text holding both stages, each introduced by its marker comment.

    A stage runs from its marker to the other stage's marker, or to the end
    of the text if it comes last.
    """
    lines = text.splitlines(keepends=True)
    vertex_at = _find_marker(lines, VERTEX_MARKER)
    fragment_at = _find_marker(lines, FRAGMENT_MARKER)
    vertex = _section(lines, vertex_at, fragment_at)
    fragment = _section(lines, fragment_at, vertex_at)
    if not (vertex and fragment):
        raise ShaderError(
            f"Shader is not complete [VS: {len(vertex)}, FS: {len(fragment)}]"
        )
    return ShaderSource(vertex=vertex, fragment=fragment)


def read_shader_file(path: Union[str, Path]) -> ShaderSource:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ShaderError(f"Could not open file {path}.") from exc
    return split_shader_source(text)


CUBE_SHADER = ShaderSource(
    vertex="""// VERTEX_SHADER
#version 330 core

layout(location=0) in vec3 pos;
layout(location=1) in vec3 normal;

uniform mat4 model;
uniform mat4 view;
uniform mat4 projection;

out vec3 frag_position;
flat out vec3 frag_normal;

void main(void) {
    frag_position = vec3(model * vec4(pos, 1));
    frag_normal   = inverse(transpose(mat3(model))) * normal;

    gl_Position = projection * view * model * vec4(pos, 1);
}
""",
    fragment="""// FRAGMENT_SHADER
#version 330 core

vec3 I    = vec3(1, 1, 1);
vec3 Iamb = vec3(0.1, 0.1, 0.1);
vec3 ka   = vec3(0.1, 0.1, 0.1);
vec3 ks   = vec3(0.5, 0.5, 0.5);

uniform vec3 kd;
uniform vec3 eye_position;
uniform vec3 light_position;

in vec3 frag_position;
flat in vec3 frag_normal;

out vec4 frag_color;

void main(void) {
    vec3 L = normalize(light_position - frag_position);
    vec3 V = normalize(eye_position - frag_position);
    vec3 H = normalize(L + V);
    vec3 N = normalize(frag_normal);

    float NdotL = dot(N, L);
    float NdotH = dot(N, H);

    vec3 amb_color  = Iamb * ka;
    vec3 diff_color = I * kd * max(0, NdotL);
    vec3 spec_color = I * ks * pow(max(0, NdotH), 100);

    if (kd == vec3(1, 1, 1))
        frag_color = vec4(1, 1, 1, 1);
    else
        frag_color = vec4((amb_color + diff_color + spec_color), 1);
}
""",
)

TEXT_SHADER = ShaderSource(
    vertex="""// VERTEX_SHADER
#version 330 core

layout (location = 2) in vec4 vertex;

out vec2 tex_coords;

uniform mat4 projection;

void main() {
    gl_Position = projection * vec4(vertex.xy, 0.0, 1.0);
    tex_coords = vertex.zw;
}
""",
    fragment="""// FRAGMENT_SHADER
#version 330 core

in  vec2 tex_coords;
out vec4 frag_color;

uniform sampler2D text;
uniform vec3 text_color;

void main() {
    vec4 sampled = vec4(1.0, 1.0, 1.0, texture(text, tex_coords).r);
    frag_color = vec4(text_color, 1.0) * sampled;
}
""",
)