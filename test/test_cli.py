from pathlib import Path

from typer.testing import CliRunner

from minifun.cli import app

runner = CliRunner()

FILES_PATH = Path(__file__).parent / "files"


def test_types_report() -> None:
    result = runner.invoke(app, ["types", "-e", "(iszero n)"])

    assert result.exit_code == 0
    assert "n :: t0" in result.output
    assert "t1 := Bool" in result.output
    assert "n :: Int" in result.output
    assert "Type: Bool" in result.output


def test_types_reports_failure() -> None:
    result = runner.invoke(app, ["types", "-e", "(1 2)"])

    assert result.exit_code == 0
    assert "Type inference failed: Cannot unify Int and Int -> t0" in result.output


def test_constraints() -> None:
    result = runner.invoke(app, ["constraints", "-e", "if c { 1 } else { 2 }"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "Context:",
        "  c :: t0",
        "Constraints:",
        "  t0 ~ Bool",
        "  Int ~ Int",
    ]


def test_typecheck_file() -> None:
    result = runner.invoke(app, ["typecheck", str(FILES_PATH / "twice.mfun")])

    assert result.exit_code == 0
    assert "Type checking succeeded" in result.output


def test_typecheck_failure_exit_code() -> None:
    result = runner.invoke(
        app,
        ["typecheck", str(FILES_PATH / "self_application.mfun")],
    )

    assert result.exit_code == 1
    assert "Occurs check failed" in result.output


def test_parse() -> None:
    result = runner.invoke(app, ["parse", "-e", "fun x { x }"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["FunctionLiteral(x)", "  Variable(x)"]


def test_parse_error() -> None:
    result = runner.invoke(app, ["parse", "-e", "(f a b)"])

    assert result.exit_code == 1
    assert "Parsing failed" in result.output


def test_requires_exactly_one_input() -> None:
    assert runner.invoke(app, ["types"]).exit_code == 2
    assert (
        runner.invoke(
            app,
            ["types", str(FILES_PATH / "identity.mfun"), "-e", "1"],
        ).exit_code
        == 2
    )


def test_debug_flag() -> None:
    result = runner.invoke(app, ["--debug", "typecheck", "-e", "(succ 1)"])

    assert result.exit_code == 0
