"""Reader for ASCII PLY files holding triangle meshes."""

from __future__ import annotations

import logging
import os
import re
from typing import Union

from mallas3d.tuples import Vec

__all__ = ["PlyError", "resolve_path", "parse", "read", "read_vertices"]

logger = logging.getLogger(__name__)

_INT_MAX = 2**31 - 1
_WORD_PATTERN = re.compile(r"\s*(\S+)")

PathLike = Union[str, "os.PathLike[str]"]


class PlyError(Exception):
    """Raised when a PLY file cannot be opened or is malformed."""


class _WordStream:
    """Whitespace-separated words of a text, with whole-line skipping."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def word(self, eof_message: str) -> str:
        match = _WORD_PATTERN.match(self._text, self._pos)
        if match is None:
            raise PlyError(eof_message)
        self._pos = match.end()
        return match.group(1)

    def integer(self, eof_message: str) -> int:
        word = self.word(eof_message)
        try:
            return int(word)
        except ValueError:
            raise PlyError(f"expected an integer, found '{word}'") from None

    def real(self, eof_message: str) -> float:
        word = self.word(eof_message)
        try:
            return float(word)
        except ValueError:
            raise PlyError(f"expected a number, found '{word}'") from None

    def skip_line(self) -> None:
        end = self._text.find("\n", self._pos)
        self._pos = len(self._text) if end < 0 else end + 1


def resolve_path(name: PathLike) -> str:
    """Return the file name, with '.ply' appended unless it already ends in 'ply'."""
    path = os.fspath(name)
    if path.rsplit(".", 1)[-1] != "ply":
        path += ".ply"
    return path


def _read_header(stream: _WordStream, with_faces: bool) -> tuple[int, int]:
    if stream.word("the input does not start with 'ply'") != "ply":
        raise PlyError("the input does not start with 'ply'")
    stream.skip_line()

    # 0: before 'element vertex', 1: before 'element face', 2: done
    state = 0
    num_vertices = 0
    num_faces = 0
    eof = "premature end of file before end_header"

    while True:
        keyword = stream.word(eof)
        if keyword == "end_header":
            if state != 2:
                raise PlyError("'element vertex' or 'element face' missing from the header")
            stream.skip_line()
            break
        if keyword == "comment" or keyword == "property":
            stream.skip_line()
        elif keyword == "format":
            kind = stream.word(eof)
            if kind != "ascii":
                raise PlyError(f"the ply format is '{kind}', not 'ascii'; cannot read it")
            stream.skip_line()
        elif keyword == "element":
            kind = stream.word(eof)
            if kind == "vertex":
                if state != 0:
                    raise PlyError("'element vertex' comes after 'element face'")
                num_vertices = stream.integer(eof)
                state = 1 if with_faces else 2
            elif with_faces and kind == "face":
                if state != 1:
                    raise PlyError("'element face' comes before 'element vertex'")
                num_faces = stream.integer(eof)
                state = 2
            stream.skip_line()

    if num_vertices <= 0:
        raise PlyError("the number of vertices is missing, zero or negative")
    if with_faces and num_faces <= 0:
        raise PlyError("the number of faces is missing, zero or negative")
    if num_vertices > _INT_MAX:
        raise PlyError("the number of vertices exceeds the largest 'int' value")
    if with_faces and num_faces > _INT_MAX:
        raise PlyError("the number of faces exceeds the largest 'int' value")
    return num_vertices, num_faces


def _read_vertices(stream: _WordStream, count: int) -> list[Vec]:
    eof = "premature end of file in the vertex list"
    vertices = []
    for _ in range(count):
        x = stream.real(eof)
        y = stream.real(eof)
        z = stream.real(eof)
        stream.skip_line()
        vertices.append(Vec(x, y, z))
    return vertices


def _read_faces(stream: _WordStream, num_vertices: int, count: int) -> list[Vec]:
    eof = "premature end of file in the face list"
    faces = []
    for _ in range(count):
        if stream.integer(eof) != 3:
            raise PlyError("found a face whose number of vertices is not 3")
        indices = []
        for _ in range(3):
            index = stream.integer(eof)
            if index < 0 or index >= num_vertices:
                raise PlyError("found a vertex index outside the vertex list")
            indices.append(index)
        stream.skip_line()
        faces.append(Vec(indices))
    return faces


def parse(text: str, with_faces: bool) -> tuple[list[Vec], list[Vec]]:
    """Parse PLY text into (vertices, faces).

    When ``with_faces`` is false only the vertices are read and the face
    list returned is empty.
    """
    stream = _WordStream(text)
    num_vertices, num_faces = _read_header(stream, with_faces)
    vertices = _read_vertices(stream, num_vertices)
    faces = _read_faces(stream, num_vertices, num_faces) if with_faces else []
    return vertices, faces


def _load(name: PathLike) -> tuple[str, str]:
    path = resolve_path(name)
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return path, handle.read()
    except OSError as exc:
        raise PlyError(f"cannot open file '{path}' for reading") from exc


def read(name: PathLike) -> tuple[list[Vec], list[Vec]]:
    """Read the vertices and triangles of a PLY file."""
    path, text = _load(name)
    vertices, faces = parse(text, True)
    logger.info(
        "ply file '%s' read: %d vertices, %d faces", path, len(vertices), len(faces)
    )
    return vertices, faces


def read_vertices(name: PathLike) -> list[Vec]:
    """Read only the vertices of a PLY file, ignoring any faces."""
    path, text = _load(name)
    vertices, _ = parse(text, False)
    logger.info("ply file '%s' read: %d vertices (faces not read)", path, len(vertices))
    return vertices