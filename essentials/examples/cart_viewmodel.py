import asyncio
from typing import Callable, List, Optional

from loguru import logger

from ..core.commands import AsyncCommand, IAsyncCommand
from ..core.errors import IErrorHandler

SubmitOrder = Callable[[List[str]], None]


class CartViewModel:
    """
    Shopping cart with a checkout command.

    Checkout is available while the cart holds items and is not already
    running. `submit_order` is called off the event loop with a copy of the
    cart; if it raises, the cart is left untouched and the failure goes to
    the error handler.
    """

    def __init__(self, error_handler: IErrorHandler,
                 submit_order: Optional[SubmitOrder] = None):
        self._cart: List[str] = []
        self._submit_order = submit_order or self._accept_order
        self._checkout = AsyncCommand("checkout", error_handler,
                                      self._do_checkout, can_execute=self._can_checkout)

    @property
    def checkout_command(self) -> IAsyncCommand:
        return self._checkout

    @property
    def cart(self) -> List[str]:
        return self._cart

    @cart.setter
    def cart(self, value: List[str]) -> None:
        self._cart = value
        self._checkout.raise_can_execute_changed()

    def _can_checkout(self, parameter) -> bool:
        return len(self._cart) > 0

    async def _do_checkout(self, parameter) -> None:
        await asyncio.to_thread(self._submit_order, list(self._cart))
        self.cart = []

    @staticmethod
    def _accept_order(items: List[str]) -> None:
        logger.info(f"Order accepted: {len(items)} item(s)")
