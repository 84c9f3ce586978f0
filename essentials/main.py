"""
Demo application: check out a cart through an AsyncCommand.

    essentials-demo [--config config.json] [--fail]
"""
import argparse
import asyncio
import sys
from typing import List, Optional

from loguru import logger

from essentials.core.config import ConfigManager
from essentials.core.errors import MessageBoxErrorHandler, SignalMessageBox
from essentials.core.excepthook import install_exception_hooks
from essentials.core.logging import setup_logging
from essentials.core.messaging import SystemMessage
from essentials.examples import CartViewModel


def _failing_submit(items: List[str]) -> None:
    raise ConnectionError("network error")


async def run_demo(config: ConfigManager, fail: bool = False) -> CartViewModel:
    if config.data.errors.install_excepthook:
        install_exception_hooks(asyncio.get_running_loop())

    message_box = SignalMessageBox()
    message_box.on_message.connect(_print_message)
    handler = MessageBoxErrorHandler(message_box, caption=config.data.errors.message_caption)

    vm = CartViewModel(handler, submit_order=_failing_submit if fail else None)
    vm.checkout_command.can_execute_changed.connect(
        lambda cmd: logger.debug(f"'{cmd.operation}' available: {cmd.can_execute()}")
    )
    vm.cart = ["Wensleydale", "Stilton"]

    if vm.checkout_command.can_execute():
        await vm.checkout_command.execute_async()
    return vm


def _print_message(message: SystemMessage) -> None:
    print(f"[{message.caption}] {message.body}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="essentials-demo")
    parser.add_argument("--config", default="config.json", help="Path to JSON or TOML settings")
    parser.add_argument("--fail", action="store_true", help="Make checkout fail to show error routing")
    args = parser.parse_args(argv)

    try:
        config = ConfigManager(args.config)
        setup_logging(config.data.general.debug_mode,
                      config.data.logging.log_dir,
                      config.data.logging.file_logging)
        logger.info(f"Starting {config.data.general.app_name}")

        vm = asyncio.run(run_demo(config, fail=args.fail))
        print(f"Cart after checkout: {vm.cart}")
        return 0
    except Exception as e:
        logger.opt(exception=e).error("Error starting the application")
        return 1


if __name__ == "__main__":
    sys.exit(main())
