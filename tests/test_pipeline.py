import pytest

from docindex import build_index, create_index
from docindex.ingest.errors import EmptyDocumentError, UnknownAssetOwnerError
from docindex.models.document import DocumentLink


def _page(title: str, body: str = "") -> str:
    return f"---\ntitle: {title}\n---\n{body}"


CORPUS = {
    "docs/01-guide/index.md": _page("Guide", "Body"),
    "docs/01-guide/02-start.md": _page("Start", "## Setup\nText\n## Usage\nMore"),
    "docs/01-guide/03-advanced/index.md": _page("Advanced"),
    "docs/01-guide/03-advanced/01-tuning.md": _page("Tuning", "Tune <!-- @include knobs -->"),
    "docs/01-guide/03-advanced/_generated.md": "<!-- @include_start knobs -->KNOBS<!-- @include_end knobs -->",
    "docs/02-reference/01-api.md": _page("API", "Endpoints"),
    "docs/02-reference/02-cli.md": _page("CLI", "Commands"),
}

ASSETS = {
    "docs/01-guide/+assets/diagram.png": "diagram-locator",
    "docs/02-reference/01-api/+assets/schema.json": "schema-locator",
}


def _walk_chain(documents, first_slug):
    visited = []
    current = documents[first_slug]
    while current is not None:
        visited.append(current.slug)
        current = documents[current.next.slug] if current.next else None
    return visited


@pytest.mark.asyncio
async def test_guide_scenario(reader):
    documents = {
        "docs/01-guide/index.md": "---\ntitle: Guide\n---\nBody",
        "docs/01-guide/02-start.md": "---\ntitle: Start\n---\n## Setup\nText",
    }

    result = await build_index(documents, {}, "docs", reader)
    guide = result.documents["guide"]
    start = result.documents["guide/start"]

    assert list(result.documents) == ["guide", "guide/start"]
    assert result.roots == [guide]
    assert guide.children == [start]
    assert guide.next == DocumentLink(slug="guide/start", title="Start")
    assert start.prev == DocumentLink(slug="guide", title="Guide")
    assert start.sections[0].slug == "setup"


@pytest.mark.asyncio
async def test_full_corpus_structure(reader):
    result = await build_index(CORPUS, ASSETS, "docs", reader)
    content = result.documents

    assert [root.slug for root in result.roots] == ["guide", "reference/api", "reference/cli"]
    assert [child.slug for child in content["guide"].children] == ["guide/start", "guide/advanced"]
    assert content["guide/advanced/tuning"].body == "Tune KNOBS"
    assert [s.title for s in content["guide/start"].sections] == ["Setup", "Usage"]
    assert content["guide"].assets == {"diagram.png": "diagram-locator"}
    assert content["reference/api"].assets == {"schema.json": "schema-locator"}
    assert result.assets_bound == 2


@pytest.mark.asyncio
async def test_links_form_single_chain_over_bodies(reader):
    content = await create_index(CORPUS, ASSETS, "docs", reader)

    for slug, document in content.items():
        assert document.slug == slug

    with_body = {slug for slug, document in content.items() if document.body}
    linked = {slug for slug, document in content.items() if document.prev or document.next}
    assert linked == with_body

    chain = _walk_chain(content, "guide")
    assert chain == ["guide", "guide/start", "guide/advanced/tuning", "reference/api", "reference/cli"]
    assert len(chain) == len(set(chain)) == len(with_body)

    advanced = content["guide/advanced"]
    assert advanced.prev is None and advanced.next is None
    assert content["guide/advanced/tuning"].prev == DocumentLink(slug="guide/start", title="Start")


@pytest.mark.asyncio
async def test_rebuild_is_deterministic(reader):
    first = await create_index(CORPUS, ASSETS, "docs", reader)
    second = await create_index(CORPUS, ASSETS, "docs", reader)

    assert [doc.to_dict() for doc in first.values()] == [doc.to_dict() for doc in second.values()]
    assert first["guide"] is not second["guide"]


@pytest.mark.asyncio
async def test_empty_leaf_fails_build(reader):
    documents = {"docs/guide/index.md": _page("Guide", "")}

    with pytest.raises(EmptyDocumentError):
        await create_index(documents, {}, "docs", reader)


@pytest.mark.asyncio
async def test_unknown_asset_owner_fails_build(reader):
    with pytest.raises(UnknownAssetOwnerError):
        await create_index(CORPUS, {"docs/missing/+assets/a.png": "a"}, "docs", reader)


@pytest.mark.asyncio
async def test_read_failure_aborts_build():
    def failing_read(locator):
        raise OSError(f"cannot read {locator}")

    with pytest.raises(OSError):
        await create_index({"docs/a.md": "x"}, {}, "docs", failing_read)
