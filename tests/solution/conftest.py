"""Fixtures that lay out a small Visual Studio solution on disk."""
from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

SLN_HEADER = "Microsoft Visual Studio Solution File, Format Version 12.00\r\n"


def make_sln(projects: list[str]) -> str:
    lines = [SLN_HEADER]
    for i, project in enumerate(projects, start=1):
        name = project.rsplit("\\", 1)[-1].removesuffix(".csproj")
        lines.append(
            'Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = '
            f'"{name}", "{project}", "{{00000000-0000-0000-0000-{i:012d}}}"\r\n'
        )
        lines.append("EndProject\r\n")
    return "".join(lines)


def make_csproj(
    assembly: str | None,
    project_refs: tuple[str, ...] = (),
    hint_paths: tuple[str, ...] = (),
) -> str:
    """Old-style project file; plain references come before project references."""
    lines = ['<Project ToolsVersion="15.0">', "  <PropertyGroup>"]
    if assembly is not None:
        lines.append(f"    <AssemblyName>{assembly}</AssemblyName>")
    lines.append("  </PropertyGroup>")
    lines.append("  <ItemGroup>")
    for hint in hint_paths:
        lines.append('    <Reference Include="x">')
        lines.append(f"      <HintPath>{hint}</HintPath>")
        lines.append("    </Reference>")
    lines.append("  </ItemGroup>")
    lines.append("  <ItemGroup>")
    for ref in project_refs:
        lines.append(f'    <ProjectReference Include="..\\{ref}\\{ref}.csproj">')
        lines.append("      <Project>{11111111-2222-3333-4444-555555555555}</Project>")
        lines.append(f"      <Name>{ref}</Name>")
        lines.append("    </ProjectReference>")
    lines.append("  </ItemGroup>")
    lines.append("</Project>")
    return "\r\n".join(lines)


@pytest.fixture
def write_solution(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Write ``{"App": csproj_text, ...}`` as App\\App.csproj and return the .sln path."""

    def _write(projects: dict[str, str]) -> Path:
        for name, content in projects.items():
            folder = tmp_path / name
            folder.mkdir(exist_ok=True)
            (folder / f"{name}.csproj").write_text(content, encoding="utf-8")
        sln = tmp_path / "Solution.sln"
        sln.write_text(make_sln([f"{n}\\{n}.csproj" for n in projects]), encoding="utf-8")
        return sln

    return _write


@pytest.fixture
def csproj() -> Callable[..., str]:
    return make_csproj


@pytest.fixture
def sln() -> Callable[[list[str]], str]:
    return make_sln
