"""Restaurant invoices: totals with discount and taxes, rendering and storage."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable, Sequence
from dataclasses import asdict, dataclass, field
from datetime import date
from pathlib import Path

__all__ = [
    "LineItem",
    "Order",
    "BillTotals",
    "InvoiceStore",
    "compute_totals",
    "render_bill",
    "main",
]

DISCOUNT_RATE = 0.1
TAX_RATE = 0.09
DEFAULT_STORE = "invoices.txt"


def _today() -> str:
    today = date.today()
    return f"{today:%b} {today.day:2d} {today.year}"


@dataclass(frozen=True)
class LineItem:
    """One ordered item with its quantity and unit price."""

    name: str
    quantity: int
    price: float

    @property
    def total(self) -> float:
        return self.quantity * self.price


@dataclass(frozen=True)
class Order:
    """A customer's order on a given date."""

    customer: str
    items: tuple[LineItem, ...] = ()
    date: str = field(default_factory=_today)

    @property
    def subtotal(self) -> float:
        return sum(item.total for item in self.items)

    def to_dict(self) -> dict:
        return {
            "customer": self.customer,
            "date": self.date,
            "items": [asdict(item) for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Order:
        return cls(
            customer=data["customer"],
            date=data["date"],
            items=tuple(LineItem(**item) for item in data["items"]),
        )


@dataclass(frozen=True)
class BillTotals:
    """Amounts shown in the footer of a bill."""

    subtotal: float
    discount: float
    net_total: float
    cgst: float
    sgst: float
    grand_total: float


def compute_totals(subtotal: float) -> BillTotals:
    """Apply the 10% discount, then 9% CGST and 9% SGST on the net total."""
    discount = DISCOUNT_RATE * subtotal
    net_total = subtotal - discount
    tax = TAX_RATE * net_total
    return BillTotals(
        subtotal=subtotal,
        discount=discount,
        net_total=net_total,
        cgst=tax,
        sgst=tax,
        grand_total=net_total + 2 * tax,
    )


def _header(order: Order) -> str:
    return (
        "\n\n"
        "\t    ADV. Restaurant"
        "\n\t    --------------------"
        f"\nDate:{order.date}"
        f"\nInvoice to: {order.customer}"
        "\n"
        "---------------------------------------------\n"
        "Items\t\tQty\t\tTotal\t\t"
        "\n---------------------------------------------"
        "\n\n"
    )


def _body_line(item: LineItem) -> str:
    return f"{item.name}\t\t{item.quantity}\t\t{item.total:.2f}\t\t\n"


def _footer(totals: BillTotals) -> str:
    return (
        "\n"
        "-------------------------------\n"
        f"Sub Total\t\t\t{totals.subtotal:.2f}"
        f"\nDiscount @10%\t\t\t{totals.discount:.2f}"
        "\n\t\t\t\t-------"
        f"\n Net Total\t\t\t{totals.net_total:.2f}"
        f"\n CGST @9\t\t\t{totals.cgst:.2f}"
        f"\n SGST @9\t\t\t{totals.sgst:.2f}"
        "\n-------------------------------------"
        f"\nGrand Total\t\t\t{totals.grand_total:.2f}"
        "\n---------------------------------------\n"
    )


def render_bill(order: Order) -> str:
    """Full text of the invoice for ``order``."""
    body = "".join(_body_line(item) for item in order.items)
    return _header(order) + body + _footer(compute_totals(order.subtotal))


class InvoiceStore:
    """Invoices kept as one JSON object per line in a file."""

    def __init__(self, path: str | Path = DEFAULT_STORE) -> None:
        self.path = Path(path)

    def save(self, order: Order) -> None:
        """Append ``order`` to the store."""
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(order.to_dict()) + "\n")

    def load_all(self) -> list[Order]:
        """Every stored order, oldest first; empty if nothing was saved yet."""
        if not self.path.exists():
            return []
        with self.path.open(encoding="utf-8") as handle:
            return [Order.from_dict(json.loads(line)) for line in handle if line.strip()]

    def find(self, customer: str) -> list[Order]:
        """Stored orders whose customer name matches exactly."""
        return [order for order in self.load_all() if order.customer == customer]


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _ask_number(prompt: str, kind: type) -> int | float:
    while True:
        answer = _ask(prompt)
        try:
            return kind(answer)
        except ValueError:
            print("\nPlease enter a number.")


def _generate(store: InvoiceStore) -> None:
    customer = _ask("\nPlease enter the name of a costomer:\t")
    count = int(_ask_number("\nPlease enter the number of Items:\t", int))
    items = []
    for number in range(1, count + 1):
        print("\n")
        name = _ask(f"Please enter the item {number}:\t")
        quantity = int(_ask_number("Please enter the quantity:\t", int))
        price = float(_ask_number("Please enter the unit price:\t", float))
        items.append(LineItem(name, quantity, price))
    order = Order(customer=customer, items=tuple(items))
    print(render_bill(order), end="")
    if _ask("\nDO you want to save the invoice [y/n]:\t")[:1] == "y":
        try:
            store.save(order)
        except OSError:
            print("\nError saving")
        else:
            print("\nSuccessfully saved")


def _show(orders: Iterable[Order]) -> None:
    for order in orders:
        print(render_bill(order), end="")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Restaurant billing system.")
    parser.add_argument("--store", default=DEFAULT_STORE, help="invoice file")
    args = parser.parse_args(argv)
    store = InvoiceStore(args.store)

    try:
        while True:
            print("\n\nPlease select ypur prefered option: ")
            print("\n\t=============ADV. RESTAURANT=============")
            print("\n1. Generate Invoice")
            print("2. Show all Invoices")
            print("3. Search Invoice")
            print("4. Exit")
            choice = _ask("\nPLease select your choice here:\t")
            if choice == "1":
                _generate(store)
            elif choice == "2":
                print("\n\n  ****Your Previous Invoices****")
                _show(store.load_all())
            elif choice == "3":
                name = _ask("\nPlease Enter the Name of the costomer:\t")
                print(f"\n  ****Invoices Of {name}****")
                found = store.find(name)
                _show(found)
                if not found:
                    print(f"\nSorry the invoice for {name} doesn't exists")
            elif choice != "4":
                print("\nError")
            again = _ask("\nDo you want to perform another operation [y/n]:\t")
            if again[:1] != "y":
                break
    except EOFError:
        pass
    print("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())