"""Regex extraction of projects and references from solution files.

A Visual Studio solution lists its projects as relative ``.csproj``
paths.  Each project file carries its assembly name and two kinds of
references:

    <Reference Include="Util"><HintPath>..\\lib\\Util.dll</HintPath></Reference>
    <ProjectReference Include="..\\Data\\Data.csproj"><Name>Data</Name></ProjectReference>

Both are reduced to a bare assembly name, which is what the graph
nodes are.  The functions here work on file contents only; reading
files is done by the builder.  Call as_single_line first: the patterns
assume a tag never spans a line break.
"""
from __future__ import annotations

import re

_CSPROJ = re.compile(r"([a-zA-Z.\\\-0-9_]+csproj)", re.IGNORECASE | re.MULTILINE)
_REFERENCE = re.compile(
    r"<hintpath>(?P<hint>.*?)</hintpath>|projectref.+?<name>(?P<name>.+?)</name>",
    re.IGNORECASE | re.DOTALL,
)
_DLL_PATH = re.compile(r"^(.+)\\(.+?)\.dll$", re.IGNORECASE)
_ASSEMBLY_NAME = re.compile(r"<assemblyname>(?P<output>.+?)</assemblyname>", re.IGNORECASE)


class SolutionError(Exception):
    """Raised when a solution or project file cannot be used."""


def as_single_line(text: str) -> str:
    return "".join(text.splitlines())


def parse_solution_projects(content: str) -> list[str]:
    """Relative project paths in the order the solution lists them."""
    return _CSPROJ.findall(content)


def parse_project_references(content: str) -> list[str]:
    """Assembly names the project references, first occurrence wins.

    Duplicates are compared case-insensitively.
    """
    seen: set[str] = set()
    refs: list[str] = []
    for m in _REFERENCE.finditer(content):
        raw = m.group("hint") if m.group("hint") is not None else m.group("name")
        name = _DLL_PATH.sub(r"\2", raw)
        folded = name.casefold()
        if folded not in seen:
            seen.add(folded)
            refs.append(name)
    return refs


def parse_assembly_name(content: str) -> str:
    m = _ASSEMBLY_NAME.search(content)
    if m is None:
        raise SolutionError("fail to parse assembly name")
    return m.group("output")
