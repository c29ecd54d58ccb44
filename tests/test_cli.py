from contextlib import redirect_stdout
from io import StringIO
import json
from pathlib import Path
import tempfile
import unittest

from docx import Document

from resume_checker.cli import main
from resume_checker.pipeline.orchestrator import MISSING_RESUME_MESSAGE


def _run_cli(*argv: str) -> tuple[int, str]:
    buffer = StringIO()
    with redirect_stdout(buffer):
        code = main(list(argv))
    return code, buffer.getvalue()


class CliTests(unittest.TestCase):
    def test_json_output_uses_wire_names(self):
        code, output = _run_cli(
            "--resume-text",
            "John Doe, email: j@x.com, 6 years experience, led team",
            "--job-text",
            "Looking for engineer with Python and AWS",
            "--local",
            "--no-delay",
            "--json",
        )
        self.assertEqual(code, 0)
        payload = json.loads(output)
        self.assertEqual(payload["result"]["score"], 30)
        self.assertIn("skillsMatch", payload["result"])
        self.assertEqual(payload["evaluated_by"], "local")
        self.assertEqual(payload["resume_source"], "pasted")

    def test_sample_run_renders_report(self):
        code, output = _run_cli("--sample", "--local", "--no-delay")
        self.assertEqual(code, 0)
        self.assertIn("Score: ", output)
        self.assertIn("Skills match: ", output)
        self.assertIn("ATS tips:", output)

    def test_text_file_resume(self):
        with tempfile.TemporaryDirectory() as tmp:
            resume = Path(tmp) / "resume.txt"
            resume.write_text("Jane Doe, jane@example.com. Led python services, improved latency 30%.", encoding="utf-8")
            code, output = _run_cli("--resume-file", str(resume), "--job-text", "python", "--local", "--no-delay")
        self.assertEqual(code, 0)
        self.assertIn("No missing keywords, great match!", output)

    def test_local_docx_resume_is_read_in_process(self):
        document = Document()
        document.add_paragraph("Jane Doe, jane@example.com")
        document.add_paragraph("Led python services, improved latency 30%.")
        with tempfile.TemporaryDirectory() as tmp:
            resume = Path(tmp) / "resume.docx"
            document.save(str(resume))
            code, output = _run_cli("--resume-file", str(resume), "--job-text", "python", "--local", "--no-delay", "--json")
        self.assertEqual(code, 0)
        payload = json.loads(output)
        self.assertEqual(payload["resume_source"], "upload")
        self.assertEqual(payload["result"]["missing"], [])

    def test_unsupported_file_is_an_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            resume = Path(tmp) / "resume.csv"
            resume.write_text("a,b,c", encoding="utf-8")
            code, output = _run_cli("--resume-file", str(resume), "--local", "--no-delay")
        self.assertEqual(code, 1)
        self.assertIn("Error: Unsupported file type '.csv'", output)

    def test_missing_resume_is_an_error(self):
        code, output = _run_cli("--job-text", "python", "--local", "--no-delay")
        self.assertEqual(code, 1)
        self.assertIn(f"Error: {MISSING_RESUME_MESSAGE}", output)

    def test_unreadable_file_exits_nonzero(self):
        code, output = _run_cli("--resume-file", "/nonexistent/resume.pdf", "--local", "--no-delay")
        self.assertEqual(code, 1)
        self.assertEqual(output, "")


if __name__ == "__main__":
    unittest.main()
