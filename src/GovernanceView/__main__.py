import argparse
import asyncio
import json
import logging
import os
import sys

import aiohttp
import aiorun
from dotenv import load_dotenv

from GovernanceView.components.ProposalPage.ProposalPageLogic import ProposalPageLogic
from GovernanceView.components.ProposalPage.qo.LoadProposalPageQo import LoadProposalPageQo
from GovernanceView.components.ProposalPage.views.ProposalPageTextBuilder import (
    ProposalPageTextBuilder,
)
from GovernanceView.services.GovernorApiService import GovernorApiService
from GovernanceView.services.StaticNameResolver import StaticNameResolver
from GovernanceView.share.HttpClient import HttpClient
from GovernanceView.share.LoggingConfigurator import LoggingConfigurator

# --- .env 和 日志配置 ---
load_dotenv()
log_level = os.getenv("LOG_LEVEL", "INFO")
configurator = LoggingConfigurator(rootLogLevel=log_level)
configurator.configure()

logger = logging.getLogger("governance_view")
# --- 日志配置结束 ---


def load_config(path: str) -> dict:
    """读取 JSON 配置文件。"""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="governance-view",
        description="显示单个治理提案的投票情况。",
    )
    parser.add_argument("proposal_id", help="提案 ID")
    parser.add_argument("--balance", type=float, default=None, help="当前用户的代币余额")
    return parser.parse_args(argv)


async def shutdown(loop):
    """专门用于清理资源的关闭回调函数"""
    logger.debug("正在关闭 HTTP 会话...")
    await HttpClient.close()


async def render_page(args: argparse.Namespace) -> int:
    """加载并输出提案页面，返回进程退出码"""
    try:
        config = load_config(os.getenv("CONFIG_PATH", "config.json"))
        HttpClient.configure(float(config.get("request_timeout", 10)))

        api_service = GovernorApiService(config["api_base_url"])
        logic = ProposalPageLogic(
            proposal_source=api_service,
            vote_source=api_service,
            name_resolver=StaticNameResolver(config.get("aliases")),
        )

        page = await logic.load_page(
            LoadProposalPageQo(
                governor=config["governor_address"],
                proposal_id=args.proposal_id,
                viewer_balance=args.balance,
                target_tz=config.get("timezone"),
            )
        )
    except (OSError, KeyError, ValueError, aiohttp.ClientError) as e:
        logger.error(f"加载提案页面失败: {e}")
        return 1

    print(ProposalPageTextBuilder.build(page))
    return 0


async def main_async(args: argparse.Namespace, result: dict):
    """主函数，运行结束后停止事件循环"""
    loop = asyncio.get_running_loop()
    try:
        result["exit_code"] = await render_page(args)
    finally:
        loop.stop()


def main():
    """主入口函数"""
    args = parse_args(sys.argv[1:])
    result = {"exit_code": 1}
    aiorun.run(
        main_async(args, result),
        shutdown_callback=shutdown,
        stop_on_unhandled_errors=True,
        use_uvloop=sys.platform != "win32",
    )
    sys.exit(result["exit_code"])


if __name__ == "__main__":
    main()
