from geometry import Drawable, Point, render


def test_point_draw_prints_single_line(capsys):
    Point(1.0, 2.0).draw()
    assert capsys.readouterr().out == "rendering\n"


def test_draw_output_ignores_coordinates(capsys):
    Point(-1000.0, float("nan")).draw()
    Point(0.0, 0.0).draw()
    assert capsys.readouterr().out == "rendering\nrendering\n"


def test_render_prints_message(capsys):
    render()
    assert capsys.readouterr().out == "rendering\n"


def test_point_satisfies_drawable():
    assert isinstance(Point(0.0, 0.0), Drawable)


def test_other_types_opt_in_without_inheriting():
    class Marker:
        def __init__(self):
            self.drawn = 0

        def draw(self):
            self.drawn += 1

    assert isinstance(Marker(), Drawable)
    assert not isinstance(object(), Drawable)
