"""
End-to-end tests for the demo composition root and the command line.
"""

import io

import pytest

from abstract_shapes import DemoConfig, ShapeFamily, build_shapes, run_demo
from abstract_shapes.cli import build_parser, main
from abstract_shapes.shapes import Circle, Ellipse, Rectangle, Square


class TestRunDemo:
    """Test suite for the composition root."""

    def test_simple_family_output(self, counter, capsys):
        """Test the simple family prints circle, square, circle."""
        run_demo(DemoConfig(family=ShapeFamily.SIMPLE), counter=counter)

        assert capsys.readouterr().out == (
            "Circle 0: draw\n"
            "Square 1: draw\n"
            "Circle 2: draw\n"
        )

    def test_robust_family_output(self, counter, capsys):
        """Test the robust family prints ellipse, rectangle, ellipse."""
        run_demo(DemoConfig(family=ShapeFamily.ROBUST), counter=counter)

        assert capsys.readouterr().out == (
            "Ellipse 0: draw\n"
            "Rectangle 1: draw\n"
            "Ellipse 2: draw\n"
        )

    def test_default_config_is_simple(self, counter, capsys):
        """Test run_demo without a config builds the simple family."""
        shapes = run_demo(counter=counter)

        assert [type(shape) for shape in shapes] == [Circle, Square, Circle]
        assert capsys.readouterr().out.splitlines()[0] == "Circle 0: draw"

    def test_returns_fixed_sequence_in_order(self, counter):
        """Test the drawn shapes come back as a tuple in creation order."""
        shapes = run_demo(DemoConfig(family="robust"), stream=io.StringIO(), counter=counter)

        assert isinstance(shapes, tuple)
        assert [type(shape) for shape in shapes] == [Ellipse, Rectangle, Ellipse]
        assert [shape.id for shape in shapes] == [0, 1, 2]

    def test_stream_redirect(self, counter, capsys):
        """Test draw lines can go to a caller-supplied stream."""
        stream = io.StringIO()

        run_demo(stream=stream, counter=counter)

        assert stream.getvalue().splitlines() == [
            "Circle 0: draw",
            "Square 1: draw",
            "Circle 2: draw",
        ]
        assert capsys.readouterr().out == ""

    def test_consecutive_runs_share_counter(self, counter):
        """Test a second run on the same counter continues the id sequence."""
        simple = build_shapes(DemoConfig(family="simple"), counter=counter)
        robust = build_shapes(DemoConfig(family="robust"), counter=counter)

        assert [shape.id for shape in simple + robust] == [0, 1, 2, 3, 4, 5]

    def test_custom_roles(self, counter):
        """Test the configured role sequence is honoured."""
        shapes = build_shapes(
            DemoConfig(family="robust", roles=("straight", "straight", "curved")),
            counter=counter,
        )

        assert [type(shape) for shape in shapes] == [Rectangle, Rectangle, Ellipse]


class TestCommandLine:
    """Test suite for the abstract-shapes command."""

    def test_parser_defaults(self):
        """Test the parser defaults to the simple family with no extras."""
        args = build_parser().parse_args([])

        assert args.family == "simple"
        assert args.inventory is False
        assert args.plot is None
        assert args.log_level == "WARNING"

    def test_rejects_unknown_family(self, capsys):
        """Test argparse exits with a usage error for unknown families."""
        with pytest.raises(SystemExit) as excinfo:
            main(["--family", "fancy"])

        assert excinfo.value.code == 2

    @pytest.mark.parametrize(
        "family, variants",
        [
            ("simple", ["Circle", "Square", "Circle"]),
            ("robust", ["Ellipse", "Rectangle", "Ellipse"]),
        ],
    )
    def test_main_draws_family(self, family, variants, capsys):
        """Test main draws three consecutive ids from the selected family."""
        assert main(["--family", family]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3

        names = [line.split()[0] for line in lines]
        ids = [int(line.split()[1].rstrip(":")) for line in lines]
        assert names == variants
        assert ids == [ids[0], ids[0] + 1, ids[0] + 2]
        assert all(line.endswith(": draw") for line in lines)

    def test_main_inventory(self, capsys):
        """Test --inventory appends a table of the produced shapes."""
        assert main(["--family", "robust", "--inventory"]) == 0

        out = capsys.readouterr().out
        draw_lines, table = out.split("\n\n", 1)
        assert len(draw_lines.splitlines()) == 3
        header = table.splitlines()[0].split()
        assert header == ["id", "variant", "role"]
        assert "Rectangle" in table
        assert "straight" in table

    def test_main_plot(self, tmp_path, capsys):
        """Test --plot writes an image file."""
        path = tmp_path / "shapes.png"

        assert main(["--plot", str(path)]) == 0

        assert path.exists()
        assert path.stat().st_size > 0
