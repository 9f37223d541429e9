import pytest

from expreval import Expression, LogLevel, Policy, configure_logging, get_logger, set_log_level


@pytest.fixture
def restore_logging():
  yield
  configure_logging(LogLevel.MINIMAL)


def test_verbose_logging_traces_pipeline(capsys, restore_logging):
  configure_logging(LogLevel.VERBOSE)
  Expression("sin(x) + 2*3").optimize()
  err = capsys.readouterr().err
  assert "Resolved 'sin(x) + 2*3' into 6 tokens" in err
  assert "Built 'sin(x) + 2*3' into 6 nodes" in err
  assert "Optimized tree from 6 to 3 nodes" in err


def test_failures_are_logged_before_raising(capsys, restore_logging):
  configure_logging(LogLevel.VERBOSE)
  with pytest.raises(Exception):
    Expression("(1")
  assert "Failed to build '(1'" in capsys.readouterr().err


def test_silent_logging(capsys, restore_logging):
  configure_logging(LogLevel.SILENT)
  Expression("x+1").optimize()
  assert capsys.readouterr().err == ""


def test_set_log_level(restore_logging):
  configure_logging(LogLevel.MINIMAL)
  set_log_level(LogLevel.DETAILED)
  assert get_logger().log_level == LogLevel.DETAILED


def test_sweep_over_absent_parameter_warns(capsys, restore_logging):
  configure_logging(LogLevel.MINIMAL)
  Expression("y + 1").set_param('y', 0).sweep('x', [1.0, 2.0])
  assert "Sweeping over 'x', which does not occur in (y + 1.0)" in capsys.readouterr().err


def test_summaries_are_skipped_below_detailed(capsys, restore_logging):
  configure_logging(LogLevel.MINIMAL)
  Expression("x + 1", Policy.OPTIMIZE)
  assert capsys.readouterr().err == ""
