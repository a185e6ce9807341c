"""
HomeLens 테스트 - 운영 CLI
"""

import importlib.util
from pathlib import Path

import pytest

from app.domain.scoring import score_listing
from app.schemas.signals import InventoryLevel, MarketSignals, NeighborhoodSignals
from app.storage import ShortlistStore
from tests.helpers import make_listing, make_search

CLI_PATH = Path(__file__).parent.parent / "scripts" / "homelens_cli.py"


def load_cli():
    spec = importlib.util.spec_from_file_location("homelens_cli", CLI_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestShortlistCommands:
    """숏리스트 조회/삭제 명령"""

    @pytest.fixture(autouse=True)
    def setup_store(self, tmp_path, monkeypatch):
        self.cli = load_cli()
        self.store = ShortlistStore(str(tmp_path))
        monkeypatch.setattr(self.cli, "get_store", lambda: self.store)

        listing = make_listing()
        score = score_listing(
            listing,
            make_search(),
            NeighborhoodSignals(school_rating=7, safety_index=70, walkability=50),
            MarketSignals(
                median_days_on_market=40,
                yoy_price_change_pct=2.0,
                inventory_level=InventoryLevel.MEDIUM,
            ),
            25,
        )
        self.item = self.store.create(listing, score)
        self.score = score

    def test_show(self, capsys):
        self.cli.cmd_show(self.item.id)
        out = capsys.readouterr().out

        assert "1234 *** St, Land O Lakes, FL" in out
        assert f"종합 점수: {self.score.overall_score}" in out
        for reason in self.score.reasons:
            assert reason in out

    def test_show_missing(self, capsys):
        self.cli.cmd_show("00000000-0000-0000-0000-000000000000")

        assert "찾을 수 없음" in capsys.readouterr().out

    def test_main_dispatches_show(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.argv", ["homelens_cli.py", "show", self.item.id])

        self.cli.main()

        assert "종합 점수" in capsys.readouterr().out

    def test_remove(self, capsys):
        self.cli.cmd_remove(self.item.id)

        assert "삭제됨" in capsys.readouterr().out
        assert self.store.get(self.item.id) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
