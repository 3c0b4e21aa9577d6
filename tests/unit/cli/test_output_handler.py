"""Unit tests for the Rich output handler."""

from src.cli.output import OutputHandler
from src.scenario.runner import ScenarioReport, StepResult


class TestOutputHandler:

    def test_info_hidden_at_verbosity_zero(self, capsys):
        OutputHandler(verbosity=0, no_color=True).info("Target: https://revue.test")
        assert "Target" not in capsys.readouterr().out

    def test_info_shown_at_verbosity_one(self, capsys):
        OutputHandler(verbosity=1, no_color=True).info("Target: https://revue.test")
        assert "Target: https://revue.test" in capsys.readouterr().out

    def test_debug_requires_verbosity_two(self, capsys):
        OutputHandler(verbosity=1, no_color=True).debug("raw body")
        assert "raw body" not in capsys.readouterr().out
        OutputHandler(verbosity=2, no_color=True).debug("raw body")
        assert "raw body" in capsys.readouterr().out

    def test_step_result_lines(self, capsys):
        handler = OutputHandler(verbosity=1, no_color=True)
        handler.step_result(StepResult("list_all", True, elapsed=0.25))
        handler.step_result(StepResult("edit_existing", False, "id not available"))

        out = capsys.readouterr().out
        assert "list_all (0.25s)" in out
        assert "edit_existing: id not available" in out

    def test_report_all_passed(self, capsys):
        report = ScenarioReport([StepResult("list_all", True)])
        OutputHandler(no_color=True).print_report(report)

        out = capsys.readouterr().out
        assert "PASS" in out
        assert "All 1 checks passed" in out

    def test_report_with_failures(self, capsys):
        report = ScenarioReport([
            StepResult("list_all", True),
            StepResult("edit_existing", False, "boom"),
        ])
        OutputHandler(no_color=True).print_report(report)

        out = capsys.readouterr().out
        assert "FAIL" in out
        assert "1 check(s) failed" in out

    def test_report_without_results(self, capsys):
        OutputHandler(no_color=True).print_report(ScenarioReport())
        assert "No checks were run" in capsys.readouterr().out
