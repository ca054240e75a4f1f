import textwrap

import pytest

from field_coverage.core.geometry import Point


@pytest.fixture
def unit_square():
    return [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]


@pytest.fixture
def field_rect():
    # 4 m x 3 m field, corners deliberately clicked out of order
    return [(4.0, 3.0), (0.0, 0.0), (0.0, 3.0), (4.0, 0.0)]


@pytest.fixture
def write_request(tmp_path):
    def _write(body: str, name: str = "field.yaml"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(body))
        return path

    return _write
