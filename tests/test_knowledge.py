from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from promptraits.knowledge import load_knowledge_base


def test_concatenates_text_and_markdown_files(tmp_path):
    (tmp_path / "a.txt").write_text("iluminación Rembrandt", encoding="utf-8")
    (tmp_path / "b.md").write_text("# Composición\nregla de tercios", encoding="utf-8")

    block = load_knowledge_base(tmp_path)

    assert block.startswith("\n## KNOWLEDGE BASE START\n\n")
    assert block.endswith("## KNOWLEDGE BASE END\n")
    assert "--- Contenido de: a.txt ---\niluminación Rembrandt\n\n" in block
    assert "--- Contenido de: b.md ---\n# Composición\nregla de tercios\n\n" in block


def test_skips_other_extensions_and_directories(tmp_path):
    (tmp_path / "notes.txt").write_text("keep", encoding="utf-8")
    (tmp_path / "photo.jpg").write_bytes(b"\xff\xd8\xff")
    (tmp_path / "nested.md").mkdir()

    block = load_knowledge_base(tmp_path)

    assert "notes.txt" in block
    assert "photo.jpg" not in block
    assert "nested.md" not in block


def test_files_are_ordered_by_name(tmp_path):
    (tmp_path / "z.txt").write_text("last", encoding="utf-8")
    (tmp_path / "a.txt").write_text("first", encoding="utf-8")

    block = load_knowledge_base(tmp_path)

    assert block.index("a.txt") < block.index("z.txt")


def test_custom_extensions(tmp_path):
    (tmp_path / "a.txt").write_text("text", encoding="utf-8")
    (tmp_path / "b.md").write_text("markdown", encoding="utf-8")

    block = load_knowledge_base(tmp_path, extensions=(".md",))

    assert "b.md" in block
    assert "a.txt" not in block


def test_empty_directory_still_framed(tmp_path):
    assert load_knowledge_base(tmp_path) == "\n## KNOWLEDGE BASE START\n\n## KNOWLEDGE BASE END\n"


def test_missing_directory_returns_fallback(tmp_path):
    block = load_knowledge_base(tmp_path / "does-not-exist")

    assert "## KNOWLEDGE BASE START - ERROR" in block
    assert "No se pudo cargar la base de conocimiento:" in block
    assert block.endswith("## KNOWLEDGE BASE END\n")


def test_undecodable_file_returns_fallback(tmp_path):
    (tmp_path / "broken.txt").write_bytes(b"\xff\xfe\xfa invalid utf-8")

    block = load_knowledge_base(tmp_path)

    assert "## KNOWLEDGE BASE START - ERROR" in block


def test_bundled_knowledge_directory_loads():
    root = Path(__file__).resolve().parents[1]

    block = load_knowledge_base(root / "knowledge")

    assert "--- Contenido de: FORMATO OBLIGATORIO DEL PROMPT.txt ---" in block


def test_symlinked_files_are_skipped(tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "secret.txt").write_text("not knowledge", encoding="utf-8")
    kb = tmp_path / "kb"
    kb.mkdir()
    (kb / "real.txt").write_text("knowledge", encoding="utf-8")
    (kb / "linked.txt").symlink_to(outside / "secret.txt")

    block = load_knowledge_base(kb)

    assert "real.txt" in block
    assert "linked.txt" not in block
    assert "not knowledge" not in block
