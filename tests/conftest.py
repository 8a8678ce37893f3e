import pytest

from tests.helpers.fake_board_api import FakeBoard


class RecordingRouter:
    def __init__(self) -> None:
        self.visits: list[tuple[str, bool]] = []

    def navigate(self, path: str, *, replace: bool = False) -> None:
        self.visits.append((path, replace))


class RecordingImageViewer:
    def __init__(self) -> None:
        self.opened: list[tuple[list, int, str]] = []

    def open(self, images, start_index: int = 0, *, title: str = "") -> None:
        self.opened.append((list(images), start_index, title))


@pytest.fixture
def fake_board():
    return FakeBoard()


@pytest.fixture
def seeded_board(fake_board):
    fake_board.add_ad(title="Sea view bungalow", description="Quiet bungalow near the beach", price=15000, categoryId=1, area="THONG_SALA", pricePeriod="MONTH", createdAt="2024-01-01T00:00:00+00:00")
    fake_board.add_ad(title="Scooter rental", description="Honda Click, helmet included", price=250, categoryId=3, area="HAAD_RIN", pricePeriod="DAY", createdAt="2024-01-02T00:00:00+00:00")
    fake_board.add_ad(title="Barista wanted", description="Morning shifts at a beach cafe", price=400, categoryId=2, area="SRITHANU", pricePeriod="DAY", createdAt="2024-01-03T00:00:00+00:00")
    fake_board.add_ad(title="Villa for sale", description="Three bedroom villa with pool", price=9000000, categoryId=1, area="CHALOKLUM", pricePeriod="SALE", createdAt="2024-01-04T00:00:00+00:00")
    return fake_board


@pytest.fixture
def router():
    return RecordingRouter()


@pytest.fixture
def image_viewer():
    return RecordingImageViewer()
