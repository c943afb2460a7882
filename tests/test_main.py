import argparse

import pytest

import GovernanceView.__main__ as cli
from GovernanceView.components.ProposalPage.ProposalPageLogic import ProposalPageLogic


def make_args(proposal_id: str = "p1") -> argparse.Namespace:
    return cli.parse_args([proposal_id, "--balance", "2"])


def test_parse_args():
    args = make_args("0x01")

    assert args.proposal_id == "0x01"
    assert args.balance == 2.0


@pytest.mark.asyncio
async def test_missing_config_gives_failing_exit_code(monkeypatch, tmp_path):
    monkeypatch.setenv("CONFIG_PATH", str(tmp_path / "missing.json"))

    assert await cli.render_page(make_args()) == 1


@pytest.mark.asyncio
async def test_incomplete_config_gives_failing_exit_code(monkeypatch, tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text('{"governor_address": "0xgov"}', encoding="utf-8")
    monkeypatch.setenv("CONFIG_PATH", str(config_path))

    assert await cli.render_page(make_args()) == 1


@pytest.mark.asyncio
async def test_rendered_page_gives_success_exit_code(monkeypatch, tmp_path, capsys):
    config_path = tmp_path / "config.json"
    config_path.write_text(
        '{"api_base_url": "https://api.example.org", "governor_address": "0xgov", "timezone": "UTC"}',
        encoding="utf-8",
    )
    monkeypatch.setenv("CONFIG_PATH", str(config_path))

    async def load_page(self, qo):
        return ProposalPageLogic.compose_page([], qo.proposal_id, None, qo.viewer_balance)

    monkeypatch.setattr(ProposalPageLogic, "load_page", load_page)

    assert await cli.render_page(make_args("p7")) == 0
    assert "Proposal p7 is loading..." in capsys.readouterr().out
