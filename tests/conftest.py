import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import worksheet_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def choice_worksheet() -> str:
    """Two choice questions with options below the stem and an answer key."""
    return (
        "1. What is the capital of France?\n"
        "A) London\n"
        "B) Paris\n"
        "C) Berlin\n"
        "D) Madrid\n"
        "\n"
        "2. Which planet is closest to the Sun?\n"
        "A. Venus\n"
        "B. Mercury\n"
        "C. Mars\n"
        "\n"
        "Answer Key: 1. B 2. B\n"
    )


@pytest.fixture
def mixed_worksheet() -> str:
    """One question of most supported types."""
    return (
        "Story: Tom found a small dog in the park. He took it home and named it Rex.\n"
        "1. What did Tom find in the park?\n"
        "2. The sky is green. (True/False)\n"
        "3. Calculate 12 + 30.\n"
        "4. The cat sat on the ___.\n"
        "5. Match the animals to their sounds\n"
        "cow - moo\n"
        "dog - woof\n"
        "6. Put in order: \"first\", \"second\", \"third\"\n"
        "7. Sort the fruits: \"apple\", \"carrot\", \"banana\"\n"
        "8. Which is a mammal? A) Shark B) Whale C) Trout\n"
        "Answer Key\n"
        "2. False\n"
        "3. 42\n"
        "4. mat\n"
        "8. B\n"
    )
