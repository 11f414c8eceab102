"""Walkthrough of the three patterns.

Usage:
    >>> python -m confpatterns demo
"""
import threading
from typing import Callable, List

from confpatterns.config.manager import ConfigurationManager
from confpatterns.domain.order import Order, Product
from confpatterns.domain.report import HtmlReportBuilder, ReportDirector, TextReportBuilder
from confpatterns.infrastructure.logging.logger import get_logger

Writer = Callable[[str], None]

logger = get_logger(__name__)


def _read_username(write: Writer) -> None:
    config = ConfigurationManager.get_instance()
    write(f"Setting 'username': {config.get_setting('username')}")


def demo_singleton(write: Writer = print, reader_count: int = 2) -> None:
    """Set ``username`` once, then read it back from concurrent threads."""
    config = ConfigurationManager.get_instance()
    config.set_setting("username", "user1")

    errors: List[BaseException] = []

    def reader() -> None:
        try:
            _read_username(write)
        except Exception as e:
            errors.append(e)

    threads = [
        threading.Thread(target=reader, name=f"settings-reader-{index}")
        for index in range(reader_count)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    if errors:
        raise errors[0]


def demo_builder(write: Writer = print) -> None:
    """Build the same report as text and as HTML."""
    director = ReportDirector()
    text_report = director.construct_report(TextReportBuilder())
    html_report = director.construct_report(HtmlReportBuilder())

    write("\nText Report:")
    write(text_report.render())
    write("\nHTML Report:")
    write(html_report.render())


def build_sample_order() -> Order:
    """Return the two-product order used by the walkthrough."""
    order = Order(shipping_cost=50, discount=10, payment_method="Credit Card")
    order.add_product(Product("Laptop", 1200))
    order.add_product(Product("Smartphone", 800))
    return order


def demo_prototype(write: Writer = print) -> None:
    """Print an order and its clone."""
    original = build_sample_order()
    write("\nOriginal Order:")
    write(original.render())

    cloned = original.clone()
    write("\nCloned Order:")
    write(cloned.render())


def run_demo(write: Writer = print) -> None:
    """Run the singleton, builder and prototype walkthroughs in order."""
    logger.debug("Running pattern walkthrough")
    demo_singleton(write)
    demo_builder(write)
    demo_prototype(write)
