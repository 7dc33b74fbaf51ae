import io
import unittest
import sys
import os
from contextlib import redirect_stdout, redirect_stderr

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth.main import main, build_parser

class TestCLI(unittest.TestCase):
    def run_cli(self, *argv):
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = main(list(argv))
        return code, buf.getvalue()

    def test_parser_choices(self):
        args = build_parser().parse_args(["generate", "--algo", "division", "--solve", "deadend"])
        self.assertEqual(args.algo, "division")
        self.assertEqual(args.solve, "deadend")
        with self.assertRaises(SystemExit):
            with redirect_stdout(io.StringIO()), redirect_stderr(io.StringIO()):
                build_parser().parse_args(["generate", "--algo", "kruskal"])

    def test_generate_plain(self):
        code, out = self.run_cli("generate", "--height", "6", "--width", "8", "--seed", "1",
                                 "--solve", "backtrack", "--plain")
        self.assertEqual(code, 0)
        lines = out.strip("\n").split("\n")
        self.assertEqual(len(lines), 7)
        self.assertEqual(lines[1][0], "S")
        self.assertEqual(lines[5][8], "G")

    def test_generate_too_small(self):
        code, _ = self.run_cli("generate", "--height", "2", "--plain")
        self.assertEqual(code, 2)

    def test_compare(self):
        code, out = self.run_cli("compare", "--height", "15", "--width", "15", "--seed", "4")
        self.assertEqual(code, 0)
        self.assertIn("Only dead-end filling: 0", out)
        self.assertIn("Only backtracking: 0", out)

    def test_no_command(self):
        code, out = self.run_cli()
        self.assertEqual(code, 0)
        self.assertIn("usage", out)

if __name__ == '__main__':
    unittest.main()
