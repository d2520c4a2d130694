from __future__ import annotations

import json
import unittest

from datefilter.demo import demo_items, demo_range
from datefilter.render.json_view import render_json
from datefilter.render.text import TITLE, render_text
from datefilter.view import build_view


def _lane(line: str) -> str:
    # "<label> |<lane>| <meta>"
    a = line.index("|")
    b = line.index("|", a + 1)
    return line[a + 1 : b]


class TestRenderTextContract(unittest.TestCase):
    def setUp(self) -> None:
        self.view = build_view(demo_items(), demo_range(), algorithm="inclusive")

    def test_layout_lines(self) -> None:
        out = render_text(self.view, width=66)
        lines = out.splitlines()
        self.assertEqual(lines[0], TITLE)
        self.assertEqual(lines[1], "Algorithm: Inclusive Overlap Algo")
        self.assertIn("Jan 14, 04:00", lines[3])
        self.assertIn("Jan 16, 22:00", lines[3])
        self.assertTrue(lines[4].startswith("Filter range"))
        self.assertTrue(lines[4].endswith("Jan 15, 09:00 - Jan 15, 17:00"))
        self.assertTrue(lines[5].startswith("Case 1"))
        self.assertTrue(lines[5].endswith("A1:in | A2:out"))
        self.assertEqual(lines[-1], "4/6 inside")

    def test_lanes_have_fixed_width(self) -> None:
        out = render_text(self.view, width=40)
        for line in out.splitlines()[4:10]:
            with self.subTest(line=line):
                self.assertEqual(len(_lane(line)), 40)

    def test_header_aligns_with_lanes_at_narrow_widths(self) -> None:
        for width in (10, 13, 20, 26, 27, 40):
            with self.subTest(width=width):
                lines = render_text(self.view, width=width).splitlines()
                header = _lane(lines[3])
                self.assertEqual(len(header), width)
                self.assertEqual(lines[3].index("|"), lines[4].index("|"))
                self.assertEqual(len(lines[3]), lines[4].rindex("|") + 1)
                self.assertTrue(header.startswith("Jan 14, 04:00"[:width]))
        wide = _lane(render_text(self.view, width=27).splitlines()[3])
        self.assertTrue(wide.startswith("Jan 14, 04:00"))
        self.assertTrue(wide.endswith("Jan 16, 22:00"))

    def test_glyphs_reflect_selection(self) -> None:
        # 66 columns over a 66 hour window: one column per hour
        lines = render_text(self.view, width=66).splitlines()
        filt = _lane(lines[4])
        self.assertEqual(filt.index("="), 29)
        self.assertEqual(filt.count("="), 8)

        case2 = _lane(lines[6])  # outside under inclusive
        self.assertNotIn("#", case2)
        self.assertEqual(case2.count("."), 4)

        case6 = _lane(lines[10])
        self.assertEqual(case6.count("#"), 3)
        self.assertEqual(case6.index("#"), 31)

    def test_boundary_markers_only_for_closed_sides(self) -> None:
        v = build_view(demo_items(), demo_range(), algorithm="inclusive", open_start=True, open_end=True)
        lines = render_text(v, width=66).splitlines()
        self.assertNotIn(":", _lane(lines[6]))
        self.assertEqual(_lane(lines[4]), "=" * 66)

        closed = render_text(self.view, width=66).splitlines()
        self.assertIn(":", _lane(closed[9]))  # Case 5 lane shows the boundary lines

    def test_narrow_width_rejected(self) -> None:
        with self.assertRaises(ValueError):
            render_text(self.view, width=5)


class TestRenderJsonContract(unittest.TestCase):
    def test_json_is_deterministic_and_parseable(self) -> None:
        v = build_view(demo_items(), demo_range(), algorithm="contained", open_end=True)
        a = render_json(v)
        b = render_json(v)
        self.assertEqual(a, b)
        obj = json.loads(a)
        self.assertEqual(obj["algorithm"], "contained")
        self.assertIsNone(obj["range"]["effective_end_ms"])
        self.assertEqual(len(obj["rows"]), 6)

    def test_pretty_output_is_indented(self) -> None:
        v = build_view(demo_items(), demo_range(), algorithm="inclusive")
        self.assertIn('\n  "algorithm"', render_json(v, pretty=True))

    def test_rejects_non_dict(self) -> None:
        with self.assertRaises(TypeError):
            render_json([])  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main(verbosity=2)
