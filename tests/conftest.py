import pytest

EXAMPLE_SCAN = [
    "498,4 -> 498,6 -> 496,6",
    "503,4 -> 502,4 -> 502,9 -> 494,9",
]


@pytest.fixture
def example_lines():
    return list(EXAMPLE_SCAN)


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "scan.txt"
    path.write_text("\n".join(EXAMPLE_SCAN) + "\n", encoding="utf-8")
    return path
