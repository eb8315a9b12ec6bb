"""Tests for xwalk_importer.importer, markdown rendering and the CLI."""

from __future__ import annotations

import json
import logging

import pytest

from xwalk_importer.importer import DocumentLoadError, import_file, import_page, load_document
from xwalk_importer.items import ImportResult
from xwalk_importer.markdown import elements_to_markdown, render_html

# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

class TestLoadDocument:
    def test_empty_markup_raises(self):
        with pytest.raises(DocumentLoadError):
            load_document("   \n")

    def test_empty_bytes_raises(self):
        with pytest.raises(DocumentLoadError):
            load_document(b"")

    def test_link_children_preserved(self):
        doc = load_document('<document><link href="x"><paragraph>T</paragraph></link></document>')
        assert doc.select_one("link > paragraph").get_text() == "T"

    def test_source_recorded(self):
        with pytest.raises(DocumentLoadError) as exc_info:
            load_document("", source="page.xml")
        assert exc_info.value.source == "page.xml"


# ---------------------------------------------------------------------------
# import_page / import_file
# ---------------------------------------------------------------------------

class TestImportPage:
    def test_full_fixture(self, stories_xml):
        result = import_page(stories_xml, url="  https://www.abbvie.com/who-we-are/our-stories.html ")
        assert isinstance(result, ImportResult)
        assert result.url == "https://www.abbvie.com/who-we-are/our-stories.html"
        assert result.element_count == 6
        assert result.found_sections == [
            "featured_story", "video_section", "recent_stories", "recent_news",
        ]
        assert "<td>Hero (video)</td>" in result.html
        assert "## Recent Stories" in result.markdown

    def test_section_summaries(self, stories_xml):
        result = import_page(stories_xml)
        by_name = {s.name: s for s in result.sections}
        assert by_name["recent_stories"].block == "Cards"
        assert by_name["recent_stories"].rows == 2
        assert by_name["recent_news"].rows == 2

    def test_unmatched_page(self):
        result = import_page("<document><generic>Hello</generic></document>")
        assert result.element_count == 0
        assert result.found_sections == []
        assert result.html == ""
        assert result.markdown == ""

    def test_html_parser_for_plain_html(self):
        html = (
            "<html><body><region>"
            '<heading level="4">Title</heading><a href="/our-stories/x.html">Go</a>'
            "</region></body></html>"
        )
        result = import_page(html, features="lxml")
        assert result.found_sections == ["featured_story"]

    def test_import_file(self, stories_path):
        result = import_file(stories_path)
        assert result.element_count == 6

    def test_import_missing_file(self, tmp_path):
        with pytest.raises(DocumentLoadError) as exc_info:
            import_file(tmp_path / "nope.xml")
        assert exc_info.value.source.endswith("nope.xml")

    def test_import_empty_file(self, tmp_path):
        path = tmp_path / "empty.xml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(DocumentLoadError):
            import_file(path)

    def test_import_declared_latin1_file(self, stories_xml, tmp_path):
        path = tmp_path / "latin1.xml"
        markup = stories_xml.replace(
            '<?xml version="1.0"?>', '<?xml version="1.0" encoding="iso-8859-1"?>',
        )
        path.write_bytes(markup.replace("Science", "Santé").encode("latin-1"))
        result = import_file(path)
        assert result.element_count == 6
        assert "Santé" in result.html

    def test_import_undeclared_latin1_file(self, stories_xml, tmp_path):
        path = tmp_path / "latin1.xml"
        path.write_bytes(stories_xml.replace("Science", "Santé").encode("latin-1"))
        assert isinstance(import_file(path), ImportResult)

    def test_html_parser_with_anchor_links(self):
        html = (
            "<html><body>"
            '<list ref="e93"><listitem>'
            '<a href="/our-stories/s.html"><heading level="4">Story</heading></a>'
            "</listitem></list>"
            '<generic><heading level="3">Recent News</heading>'
            '<a href="https://news.abbvie.com/x"><generic>May 1, 2025</generic>'
            "<paragraph>Headline</paragraph></a>"
            "</generic>"
            "</body></html>"
        )
        result = import_page(html, features="lxml")
        assert result.found_sections == ["recent_stories", "recent_news"]
        assert '<p class="news-date">May 1, 2025</p>' in result.html
        assert '<a href="https://news.abbvie.com/x">Headline</a>' in result.html
        assert '<a href="/our-stories/s.html">Story</a>' in result.html

    def test_snapshot_under_html_parser_warns_on_empty_news(self, stories_xml, caplog):
        # <link> is void in HTML, so the news links lose their children.
        with caplog.at_level(logging.WARNING, logger="xwalk_importer.sections.news"):
            import_page(stories_xml, features="lxml")
        assert "no date or title" in caplog.text


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

class TestRendering:
    def test_empty(self):
        assert render_html([]) == ""
        assert elements_to_markdown([]) == ""

    def test_markdown_headings_and_blocks(self, stories_doc):
        from xwalk_importer.transform import transform

        md = elements_to_markdown(transform(stories_doc))
        assert "## Recent Stories" in md
        assert "## Recent News" in md
        assert "Cards (news)" in md
        assert "\n\n\n" not in md

    def test_markdown_keeps_placeholder_images(self, stories_xml):
        md = import_page(stories_xml).markdown
        assert "](./media_placeholder_hero.png)" in md
        assert "](./media_placeholder_video.png)" in md
        assert md.count("](./media_placeholder_story.png)") == 2

    def test_markdown_separates_cell_blocks(self, stories_xml):
        md = import_page(stories_xml).markdown
        assert "ScienceRedefining" not in md
        assert "Science Redefining what is possible in immunology" in md
        assert "5 Minute Read [Read story]" in md


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

class TestCli:
    def test_markdown_to_stdout(self, stories_path, capsys):
        from xwalk_importer.__main__ import main

        assert main(["--input", str(stories_path), "--quiet"]) == 0
        out = capsys.readouterr().out
        assert "## Recent Stories" in out

    def test_json_to_file(self, stories_path, tmp_path):
        from xwalk_importer.__main__ import main

        out_file = tmp_path / "out" / "result.json"
        code = main([
            "--input", str(stories_path),
            "--format", "json",
            "--out", str(out_file),
            "--url", "https://www.abbvie.com/who-we-are/our-stories.html",
        ])
        assert code == 0
        data = json.loads(out_file.read_text(encoding="utf-8"))
        assert data["element_count"] == 6
        assert data["url"] == "https://www.abbvie.com/who-we-are/our-stories.html"

    def test_html_format(self, stories_path, capsys):
        from xwalk_importer.__main__ import main

        assert main(["--input", str(stories_path), "--format", "html", "--quiet"]) == 0
        assert "<td>Cards</td>" in capsys.readouterr().out

    def test_missing_input_exits_1(self, tmp_path, capsys):
        from xwalk_importer.__main__ import main

        assert main(["--input", str(tmp_path / "missing.xml"), "--quiet"]) == 1
        assert "ERROR:" in capsys.readouterr().err

    def test_latin1_input(self, stories_xml, tmp_path, capsys):
        from xwalk_importer.__main__ import main

        path = tmp_path / "latin1.xml"
        path.write_bytes(stories_xml.replace("Science", "Santé").encode("latin-1"))
        assert main(["--input", str(path), "--quiet"]) == 0

    def test_unwritable_out_exits_1(self, stories_path, tmp_path, capsys):
        from xwalk_importer.__main__ import main

        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        code = main([
            "--input", str(stories_path),
            "--out", str(blocker / "result.md"),
            "--quiet",
        ])
        assert code == 1
        assert "ERROR: Cannot write" in capsys.readouterr().err
