"""Employee records and selection of the highest-paid one."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["Employee", "highest_paid", "describe"]


@dataclass(frozen=True)
class Employee:
    """An employee's name, account number and salary."""

    name: str
    account_number: str
    salary: int


def highest_paid(employees: Iterable[Employee]) -> Employee:
    """Employee with the largest salary; the earliest one wins a tie."""
    staff = list(employees)
    if not staff:
        raise ValueError("no employees given")
    best = staff[0]
    for employee in staff[1:]:
        if employee.salary > best.salary:
            best = employee
    return best


def describe(employee: Employee) -> str:
    """Multi-line description of an employee's details."""
    return (
        f"\n Name of the employee is:  {employee.name}"
        f"\n Account number is:  {employee.account_number}"
        f"\n Salary is: {employee.salary}"
        "\n"
    )