"""Shared fixtures: an in-memory Contents API and isolated settings."""

import base64
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx
import orjson
import pytest
from PySide6.QtCore import QSettings

from student_corpus.content import ContentFetcher
from student_corpus.settings import AppSettings

API_BASE = "https://api.github.test"
OWNER = "ycshu"
REPO = "baseball-comic-obsidian"
BRANCH = "main"

STUDENT_A = "C44116146"
STUDENT_B = "D55227257"
STUDENT_C = "E66338368X"


def encode_file(text: str, wrap: int = 60) -> Dict[str, Any]:
    """Build a Contents API file entry with GitHub-style wrapped base64."""
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    wrapped = "\n".join(encoded[i : i + wrap] for i in range(0, len(encoded), wrap))
    return {"type": "file", "encoding": "base64", "content": wrapped + "\n"}


class FakeContentTree:
    """Serves directory listings and files keyed by content path."""

    def __init__(self):
        self.payloads: Dict[str, Any] = {}
        self.statuses: Dict[str, int] = {}
        self.requests: List[Tuple[str, Optional[str]]] = []

    def add_text(self, path: str, text: str) -> None:
        self.payloads[path] = encode_file(text)

    def add_json(self, path: str, data: Any) -> None:
        self.add_text(path, orjson.dumps(data).decode("utf-8"))

    def add_dir(self, path: str, entries: List[Tuple[str, str]]) -> None:
        self.payloads[path] = [
            {"name": name, "type": entry_type, "path": f"{path}/{name}"}
            for name, entry_type in entries
        ]

    def fail(self, path: str, status: int) -> None:
        self.statuses[path] = status

    def handler(self, request: httpx.Request) -> httpx.Response:
        prefix = f"/repos/{OWNER}/{REPO}/contents/"
        path = request.url.path[len(prefix) :]
        self.requests.append((path, request.url.params.get("ref")))

        if path in self.statuses:
            return httpx.Response(self.statuses[path], json={"message": "error"})
        if path not in self.payloads:
            return httpx.Response(404, json={"message": "Not Found"})
        return httpx.Response(200, content=orjson.dumps(self.payloads[path]))

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def requested_paths(self) -> List[str]:
        return [path for path, _ref in self.requests]


@pytest.fixture
def tree() -> FakeContentTree:
    """A content tree with three students, a name map and some noise."""
    tree = FakeContentTree()
    tree.add_json("data/student_name_map.json", {STUDENT_A: "王小明", STUDENT_B: "李小華"})
    tree.add_dir(
        "data/students",
        [
            (STUDENT_A, "dir"),
            ("README.md", "file"),
            (STUDENT_B, "dir"),
            ("template", "dir"),
            (STUDENT_C, "dir"),
        ],
    )
    tree.add_json(
        f"data/students/{STUDENT_A}/index.json",
        {
            "players": [{"id": "p1", "name_zh": "王建民", "summary": "投手"}],
            "events": [
                {"id": "e1", "title": "再見全壘打", "summary": "九局下逆轉"},
                {"id": "e2", "title": "雙殺", "summary": "守備"},
            ],
            "glossary": [{"term": "ERA", "explain_zh": "防禦率"}],
        },
    )
    tree.add_json(
        f"data/students/{STUDENT_B}/index.json",
        {
            "players": [{"id": "p9", "name_zh": "陳金鋒", "position": "左外野"}],
            "events": [],
        },
    )
    tree.add_json(
        f"data/students/{STUDENT_C}/index.json",
        {"glossary": [{"term": "打點", "explain_zh": "RBI", "tags": ["全壘打"]}]},
    )
    return tree


@pytest.fixture
def fetcher(tree: FakeContentTree) -> ContentFetcher:
    return ContentFetcher(OWNER, REPO, BRANCH, api_base=API_BASE, client=tree.client())


@pytest.fixture
def app_settings(tmp_path) -> AppSettings:
    """Settings stored in an INI file under tmp_path, pointed at the fake API."""
    qsettings = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    settings = AppSettings(settings=qsettings)
    settings.source.api_base = API_BASE
    return settings


@pytest.fixture
def restore_root_logging():
    """Undo handler changes made by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
