"""
Shared pytest fixtures for the Pareto analyzer test suite.

Provides:
  - Sample document texts (two-row scenario, sales sheet, non-numeric sheet).
  - ``restore_root_logger``: undoes ``configure_logging()`` side effects.
  - ``config_file``: a minimal TOML config with logging quietened, for CLI
    and loader tests.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest


# ── Sample documents ──────────────────────────────────────────────────────────

@pytest.fixture
def two_row_text() -> str:
    """B outweighs A 90:10."""
    return "name,val\nA,10\nB,90"


@pytest.fixture
def sales_text() -> str:
    """Ten products weighing 1000 in total; the first two carry 80% of it.

    Row weights (units + revenue):
      Widget 400, Gadget 400, Gizmo 50, Doohickey 50, Thingamajig 25,
      Whatsit 20, Sprocket 20, Flange 20, Bracket 12, Grommet 3.
    """
    return (
        "product,units,revenue\n"
        "Widget,10,390\n"
        "Gadget,5,395\n"
        "Gizmo,2,48\n"
        "Doohickey,1,49\n"
        "Thingamajig,1,24\n"
        "Whatsit,1,19\n"
        "Sprocket,1,19\n"
        "Flange,0,20\n"
        "Bracket,0,12\n"
        "Grommet,0,3\n"
    )


@pytest.fixture
def non_numeric_text() -> str:
    return "name,city\nAlice,Madrid\nBob,Lima\nCarla,Quito\n"


# ── Config ────────────────────────────────────────────────────────────────────

@pytest.fixture
def restore_root_logger():
    """Undo handler changes made by ``configure_logging()`` during a test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A TOML config with WARNING-level logging and a tmp report dir."""
    path = tmp_path / "config" / "default.toml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        "[parsing]\n"
        "honor_quotes = false\n"
        "\n"
        "[source]\n"
        "timeout_s = 5.0\n"
        "\n"
        "[report]\n"
        f'output_dir = "{(tmp_path / "reports").as_posix()}"\n'
        "top_n = 5\n"
        "\n"
        "[logging]\n"
        'level = "WARNING"\n'
        'log_file = ""\n',
        encoding="utf-8",
    )
    return path
