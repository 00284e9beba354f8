import pytest

from algokit.cli import main
from algokit.numbers import ackermann, bitwise_summary, fahrenheit_to_celsius


def run(capsys, *argv):
    status = main(list(argv))
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_ackermann_defaults(capsys):
    status, out, _ = run(capsys, "ackermann")
    assert status == 0
    assert out == f"Ackermann(2, 3) = {ackermann(2, 3)}\n"


def test_ackermann_explicit(capsys):
    status, out, _ = run(capsys, "ackermann", "0", "4")
    assert status == 0
    assert out == "Ackermann(0, 4) = 5\n"


def test_ackermann_negative_is_error(capsys):
    status, out, err = run(capsys, "ackermann", "-1", "2")
    assert status == 1
    assert out == ""
    assert err.startswith("error:")


def test_binary_search_default(capsys):
    status, out, _ = run(capsys, "binary-search")
    assert status == 0
    assert out == "Element found at index 4\n"


def test_binary_search_missing(capsys):
    status, out, _ = run(capsys, "binary-search", "7")
    assert status == 0
    assert out == "Element not found.\n"


def test_binary_search_custom_items(capsys):
    status, out, _ = run(capsys, "binary-search", "3", "--items", "1", "2", "3")
    assert status == 0
    assert out == "Element found at index 2\n"


def test_bitwise_default_lines(capsys):
    status, out, _ = run(capsys, "bitwise")
    results = bitwise_summary(12, 5)
    lines = out.splitlines()
    assert status == 0
    assert lines[0] == f"a & b (AND): {results['and']}"
    assert lines[3] == f"~a (NOT): {results['not']}"
    assert len(lines) == 6
    assert lines[-1].startswith("a >> 1 (Right Shift): ")


@pytest.mark.parametrize(
    "number, expected",
    [("4", "4 is Even Number\n"), ("7", "7 is Odd Number\n"), ("0", "0 is Even Number\n")],
)
def test_even_odd(capsys, number, expected):
    status, out, _ = run(capsys, "even-odd", number)
    assert status == 0
    assert out == expected


def test_fibonacci_series(capsys):
    status, out, _ = run(capsys, "fibonacci", "7")
    assert status == 0
    assert out == "Fibonacci Series: 0 1 1 2 3 5 8\n"


def test_fibonacci_zero_terms(capsys):
    status, out, _ = run(capsys, "fibonacci", "0")
    assert status == 0
    assert out == "Fibonacci Series:\n"


def test_linear_search_found(capsys):
    status, out, _ = run(capsys, "linear-search", "30")
    assert status == 0
    assert out == "Element is found at index 2\n"


def test_linear_search_missing(capsys):
    status, out, _ = run(capsys, "linear-search", "35")
    assert status == 0
    assert out == "Element not found\n"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("racecar", "The string is a palindrome.\n"),
        ("hello", "The string is not a palindrome.\n"),
        ("Aa", "The string is not a palindrome.\n"),
    ],
)
def test_palindrome(capsys, text, expected):
    status, out, _ = run(capsys, "palindrome", text)
    assert status == 0
    assert out == expected


@pytest.mark.parametrize(
    "number, expected",
    [
        ("7", "7 is a Prime number\n"),
        ("1", "1 is not a prime number\n"),
        ("9", "9 is not a prime number\n"),
    ],
)
def test_prime(capsys, number, expected):
    status, out, _ = run(capsys, "prime", number)
    assert status == 0
    assert out == expected


def test_temperature_freezing_point(capsys):
    status, out, _ = run(capsys, "temperature", "32")
    assert status == 0
    assert out == "Temp in Celsius is 0.000000\n"


def test_temperature_matches_conversion(capsys):
    status, out, _ = run(capsys, "temperature", "100")
    assert status == 0
    assert out == f"Temp in Celsius is {fahrenheit_to_celsius(100.0):f}\n"


def test_students_listing(capsys):
    status, out, _ = run(capsys, "students", "alice", "1", "90.5", "bob", "2", "78")
    assert status == 0
    assert out.splitlines() == [
        "",
        "Student Details:",
        "Name: alice, Roll No: 1, Marks: 90.50",
        "Name: bob, Roll No: 2, Marks: 78.00",
    ]


def test_students_incomplete_record_is_error(capsys):
    status, out, err = run(capsys, "students", "alice", "1")
    assert status == 1
    assert out == ""
    assert "error" in err


def test_students_bad_roll_is_error(capsys):
    status, _, err = run(capsys, "students", "alice", "x", "90")
    assert status == 1
    assert "invalid student record" in err


def test_profile_round_trip(capsys, tmp_path):
    target = tmp_path / "data.txt"
    status, out, _ = run(capsys, "profile", "alice", "30", "--path", str(target))
    assert status == 0
    assert target.read_text(encoding="utf-8") == "Name: alice\nAge: 30\n"
    assert out.splitlines() == [
        "Data written to file successfully.",
        "",
        "Reading data from file:",
        "Name: alice",
        "Age: 30",
    ]


def test_profile_missing_directory_is_error(capsys, tmp_path):
    target = tmp_path / "absent" / "data.txt"
    status, out, err = run(capsys, "profile", "alice", "30", "--path", str(target))
    assert status == 1
    assert out == ""
    assert err.startswith("error:")


def test_unknown_command_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["nonsense"])
    assert info.value.code == 2


def test_non_integer_argument_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["prime", "seven"])
    assert info.value.code == 2