"""
Integration tests for the mora-jai command line.

Covers the three subcommands end to end:
- batch: per-line errors do not stop later lines
- play: a scripted session solves the puzzle
- generate: seeded output and JSON receipts
"""

import io
import json

from mora_io.cli import main

FIXTURE_LINE = "wwwwwwww-w--w"


def run(argv, stdin_text=""):
    stdout = io.StringIO()
    status = main(argv, stdin=io.StringIO(stdin_text), stdout=stdout)
    return status, stdout.getvalue()


class TestBatch:
    def test_batch_solves_each_line(self):
        status, out = run(["batch"], FIXTURE_LINE + "\n")
        assert status == 0
        assert out.splitlines() == [f"{FIXTURE_LINE}: Solution: 3 2"]

    def test_bad_line_does_not_stop_batch(self):
        lines = "\n".join(["xyz", FIXTURE_LINE, "", "wwww---------"]) + "\n"
        status, out = run(["batch"], lines)

        assert status == 1
        output = out.splitlines()
        assert len(output) == 3
        assert output[0].startswith("xyz: error:")
        assert output[1] == f"{FIXTURE_LINE}: Solution: 3 2"
        assert output[2] == "wwww---------: no solution"

    def test_batch_reads_file(self, tmp_path):
        path = tmp_path / "puzzles.txt"
        path.write_text("wwww www w-w --w\n")
        status, out = run(["batch", str(path)])
        assert status == 0
        assert out.strip() == f"{FIXTURE_LINE}: Solution: 3 2"


class TestPlay:
    def test_scripted_session_solves(self):
        status, out = run(
            ["play", "--puzzle", FIXTURE_LINE, "--show-solution"],
            "3\n2\nq\nw\na\ns\n",
        )
        assert status == 0
        assert "Solution: 3 2" in out
        assert out.rstrip().endswith("Solved!")

    def test_unknown_key_is_reported(self):
        status, out = run(["play", "--puzzle", FIXTURE_LINE], "z\nx\n")
        assert status == 1
        assert "Unknown key 'z'" in out

    def test_wrong_corner_resets(self):
        status, out = run(["play", "--puzzle", FIXTURE_LINE], "3\na\nx\n")
        assert status == 1
        # Board after the reset equals the starting board
        boards = out.split("Goals:")
        assert boards[-1] == boards[1]

    def test_bad_puzzle_line(self):
        status, out = run(["play", "--puzzle", "ww"])
        assert status == 2
        assert "error" in out

    def test_end_of_input_quits(self):
        status, _out = run(["play", "--puzzle", FIXTURE_LINE], "")
        assert status == 1


class TestGenerate:
    def test_seeded_generate_is_reproducible(self):
        _, first = run(["--seed", "4", "generate", "--count", "2"])
        _, second = run(["--seed", "4", "generate", "--count", "2"])
        assert first == second
        assert len(first.splitlines()) == 2

    def test_receipts_written(self, tmp_path):
        status, out = run(["--seed", "0", "generate", "--receipts-dir", str(tmp_path)])
        assert status == 0

        files = list(tmp_path.glob("*.json"))
        assert len(files) == 1

        receipt = json.loads(files[0].read_text())
        assert receipt["status"] == "SOLVED"
        assert receipt["puzzle"] == out.split(":")[0]
        assert receipt["generator"]["seed"] == 0
        assert receipt["search"]["found"] is True
