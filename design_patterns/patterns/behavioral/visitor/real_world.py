"""Visitor - real-world example: salary reports.

``SalaryReport`` walks a company's departments and employees and renders a
report for any of them, without the entity classes knowing about reports.
"""

from abc import ABC, abstractmethod
from typing import List


def format_international(amount: int) -> str:
    return f"USD {amount:,.2f}"


def format_national(amount: int) -> str:
    return f"${amount:>11,.2f}"


class Entity(ABC):
    @abstractmethod
    def accept(self, visitor: "Visitor") -> str:
        pass


class Employee(Entity):
    def __init__(self, name: str, position: str, salary: int):
        self.name = name
        self.position = position
        self.salary = salary

    def accept(self, visitor: "Visitor") -> str:
        return visitor.visit_employee(self)


class Department(Entity):
    def __init__(self, name: str, employees: List[Employee]):
        self.name = name
        self.employees = employees

    def get_cost(self) -> int:
        return sum(employee.salary for employee in self.employees)

    def accept(self, visitor: "Visitor") -> str:
        return visitor.visit_department(self)


class Company(Entity):
    def __init__(self, name: str, departments: List[Department]):
        self.name = name
        self.departments = departments

    def accept(self, visitor: "Visitor") -> str:
        return visitor.visit_company(self)


class Visitor(ABC):
    @abstractmethod
    def visit_company(self, company: Company) -> str:
        pass

    @abstractmethod
    def visit_department(self, department: Department) -> str:
        pass

    @abstractmethod
    def visit_employee(self, employee: Employee) -> str:
        pass


class SalaryReport(Visitor):
    def visit_company(self, company: Company) -> str:
        output = ""
        total = 0

        for department in company.departments:
            total += department.get_cost()
            output += "\n--" + self.visit_department(department)

        return f"{company.name} ({format_international(total)})\n{output}"

    def visit_department(self, department: Department) -> str:
        output = "".join("   " + self.visit_employee(employee) for employee in department.employees)
        return f"{department.name} ({format_international(department.get_cost())})\n\n{output}"

    def visit_employee(self, employee: Employee) -> str:
        return f"{format_national(employee.salary)} {employee.name} ({employee.position})\n"


def build_company() -> Company:
    mobile_dev = Department("Mobile Development", [
        Employee("Albert Falmore", "designer", 100000),
        Employee("Ali Halabay", "programmer", 100000),
        Employee("Sarah Konor", "programmer", 90000),
        Employee("Monica Ronaldino", "QA engineer", 31000),
        Employee("James Smith", "QA engineer", 30000),
    ])
    tech_support = Department("Tech Support", [
        Employee("Larry Ulbrecht", "supervisor", 70000),
        Employee("Elton Pale", "operator", 30000),
        Employee("Rajeet Kumar", "operator", 30000),
        Employee("John Burnovsky", "operator", 34000),
        Employee("Sergey Korolev", "operator", 35000),
    ])
    return Company("SuperStarDevelopment", [mobile_dev, tech_support])


def main() -> None:
    company = build_company()
    report = SalaryReport()

    print("Client: I can print a report for a whole company:\n")
    print(company.accept(report), end="")

    print("\nClient: ...or for different entities "
          "such as an employee, a department, or the whole company:\n")
    some_employee = Employee("Some employee", "operator", 35000)
    tech_support = company.departments[1]
    for entity in [some_employee, tech_support, company]:
        print(entity.accept(report))


if __name__ == "__main__":
    main()
