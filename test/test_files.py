from pathlib import Path

import pytest

from minifun.parser.parser import parse
from minifun.typechecker.infer import InferenceResult, infer

from .utility.file_tester import file_test_type, get_all_test_files

BASE_TEST_FILES_PATH = Path(__file__).parent / "files"


@pytest.mark.parametrize(
    "file_name",
    list(get_all_test_files(BASE_TEST_FILES_PATH, "mfun")),
    ids=lambda p: p.stem,
)
def test_is_type_valid(file_name: Path) -> None:
    def run_inference(f: Path) -> InferenceResult:
        return infer(parse(f))

    file_test_type(file_name, run_inference)
