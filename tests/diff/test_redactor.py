import unittest

from commitgate.diff.redactor import IDENTIFIER_PLACEHOLDER, redact


class TestRedact(unittest.TestCase):
    def test_secret_assignments_keep_key_name(self) -> None:
        diff = "+API_KEY=sk-123\n+PASSWORD=hunter2\n+TOKEN=abc def\n+PRIVATE_KEY=-----BEGIN"
        self.assertEqual(
            redact(diff),
            "+API_KEY=REDACTED\n+PASSWORD=REDACTED\n+TOKEN=REDACTED\n+PRIVATE_KEY=REDACTED",
        )

    def test_secret_name_as_suffix_is_redacted(self) -> None:
        self.assertEqual(redact("+OPENAI_API_KEY=xyz"), "+OPENAI_API_KEY=REDACTED")
        self.assertEqual(redact("+CLIENT_SECRET=xyz"), "+CLIENT_SECRET=REDACTED")

    def test_lowercase_names_are_not_matched(self) -> None:
        self.assertEqual(redact("+password=hunter2"), "+password=hunter2")

    def test_removes_line_comments(self) -> None:
        self.assertEqual(redact("+x = 1; // temporary\n+y = 2;"), "+x = 1; \n+y = 2;")

    def test_removes_single_line_block_comments(self) -> None:
        self.assertEqual(redact("+call(/* inline */ arg);"), "+call( arg);")

    def test_multiline_block_comment_is_a_known_gap(self) -> None:
        text = "+/* first\n+second */"
        self.assertEqual(redact(text), text)

    def test_comment_inside_key_name_is_a_known_gap(self) -> None:
        once = redact("+PASS/**/WORD=hunter2")
        self.assertEqual(once, "+PASSWORD=hunter2")
        self.assertEqual(redact(once), "+PASSWORD=REDACTED")

    def test_idempotent(self) -> None:
        samples = [
            "",
            "+API_KEY=abc // note\n-const a = 1; /* old */\n context line",
            "diff --git a/x.js b/x.js\n+SECRET=1\n+TOKEN=REDACTED",
            "no matches at all",
        ]
        for text in samples:
            once = redact(text)
            self.assertEqual(redact(once), once)

    def test_never_raises_on_odd_input(self) -> None:
        for text in ["\x00\x01", "/*", "*/", "//", "=" * 50, "\n\n\n", "é漢字"]:
            redact(text)
            redact(text, strict=True)

    def test_strict_masks_long_identifiers(self) -> None:
        token = "a1B2c3D4e5F6g7H8i9J0k1L2m3N4o5P6q7"
        result = redact(f"+headers = {{'X-Key': '{token}'}}", strict=True)
        self.assertNotIn(token, result)
        self.assertIn(IDENTIFIER_PLACEHOLDER, result)

    def test_strict_keeps_short_identifiers(self) -> None:
        self.assertEqual(redact("+total_count = 3", strict=True), "+total_count = 3")


if __name__ == "__main__":
    unittest.main()
