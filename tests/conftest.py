from __future__ import annotations

from collections.abc import Callable

import pytest
from click.testing import CliRunner

from ley_markdown.config import ConverterConfig
from ley_markdown.dom import body_nodes, parse_html
from ley_markdown.models import DocumentNode

SAMPLE_DOCUMENT = """\
<html>
<head><title>BOE</title></head>
<body>
<h2>Ley Orgánica 3/2018, de protección de datos</h2>
<p>Jefatura del Estado</p>
<h4>Sección primera</h4>
<h4>Disposiciones generales</h4>
<h4>Capítulo I</h4>
<p>Artículo 1. Objeto de la ley.</p>
<table><tr><td>1. Proteger los datos.</td></tr><tr><td>b) Garantizar derechos.</td></tr></table>
<p>   </p>
<div>navegación</div>
<h4>Capítulo II</h4>
<p>Artículo 2. Ámbito de aplicación.</p>
<h4>Disposiciones transitorias</h4>
<h4>Parte II</h4>
<p>Artículo 3. Régimen transitorio.</p>
<hr>
<p>Texto tras la línea</p>
<table><tr><td>* Nota al pie.</td></tr><tr><td>** Segunda nota.</td></tr></table>
<p>Pie de página</p>
</body>
</html>
"""

SAMPLE_MARKDOWN = (
    "Ley Orgánica 3/2018, de protección de datos\n"
    + "=" * len("Ley Orgánica 3/2018, de protección de datos")
    + "\n"
    "\nJefatura del Estado\n"
    "\n## Sección primera\n"
    "\nDisposiciones generales\n"
    "\n### Capítulo I\n"
    "\n__Artículo 1__. Objeto de la ley.\n"
    "\n1) Proteger los datos.\n"
    "\nb) Garantizar derechos.\n"
    "\n### Capítulo II\n"
    "\n__Artículo 2__. Ámbito de aplicación.\n"
    "\n## Disposiciones transitorias\n"
    "\n### Parte II\n"
    "\n__Artículo 3__. Régimen transitorio.\n"
    "\n---\n"
    "\n(*) Nota al pie.\n"
    "\n(**) Segunda nota.\n"
)


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def make_nodes() -> Callable[..., tuple[DocumentNode, ...]]:
    """Builds body nodes from an HTML fragment placed inside ``<body>``."""

    def _make(fragment: str, config: ConverterConfig | None = None):
        return body_nodes(parse_html(f"<html><body>{fragment}</body></html>", config), config)

    return _make


@pytest.fixture()
def make_node(make_nodes) -> Callable[..., DocumentNode]:
    """Builds the single body node described by an HTML fragment."""

    def _make(fragment: str, config: ConverterConfig | None = None):
        (node,) = make_nodes(fragment, config)
        return node

    return _make


@pytest.fixture()
def sample_html() -> str:
    """A small but complete legal document."""
    return SAMPLE_DOCUMENT


@pytest.fixture()
def sample_markdown() -> str:
    """Expected conversion of `sample_html`."""
    return SAMPLE_MARKDOWN
