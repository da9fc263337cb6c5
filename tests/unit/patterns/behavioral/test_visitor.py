"""Tests for the Visitor examples."""

from design_patterns.patterns.behavioral.visitor import conceptual, real_world


class TestVisitorConceptual:
    """Test double dispatch between components and visitors."""

    def test_main_output(self, capsys):
        """Test both visitors visit both components."""
        conceptual.main()

        assert capsys.readouterr().out == (
            "The client code works with all visitors via the base Visitor interface:\n"
            "A + ConcreteVisitor1\n"
            "B + ConcreteVisitor1\n"
            "\n"
            "It allows the same client code to work with different types of visitors:\n"
            "A + ConcreteVisitor2\n"
            "B + ConcreteVisitor2\n"
        )


class TestSalaryReport:
    """Test salary reports over the company structure."""

    def test_employee_report(self):
        """Test a single employee line."""
        employee = real_world.Employee("Some employee", "operator", 35000)

        assert employee.accept(real_world.SalaryReport()) == "$  35,000.00 Some employee (operator)\n"

    def test_department_cost(self):
        """Test department costs are the sum of salaries."""
        company = real_world.build_company()

        assert [department.get_cost() for department in company.departments] == [351000, 199000]

    def test_department_report(self):
        """Test the department header and indented employees."""
        tech_support = real_world.build_company().departments[1]

        report = tech_support.accept(real_world.SalaryReport())

        assert report.startswith("Tech Support (USD 199,000.00)\n\n")
        assert "   $  70,000.00 Larry Ulbrecht (supervisor)\n" in report
        assert report.count("\n   ") == 5

    def test_company_report(self):
        """Test the company total and departments."""
        report = real_world.build_company().accept(real_world.SalaryReport())

        assert report.startswith("SuperStarDevelopment (USD 550,000.00)\n\n--Mobile Development")
        assert "\n--Tech Support (USD 199,000.00)" in report

    def test_main_output(self, capsys):
        """Test the reports printed by the client."""
        real_world.main()

        out = capsys.readouterr().out
        assert out.startswith("Client: I can print a report for a whole company:\n\n")
        assert out.count("SuperStarDevelopment (USD 550,000.00)") == 2
        assert "$  35,000.00 Some employee (operator)\n" in out
