"""
Tests for the digestkit command line.
"""

import io

from digestkit.main import main, run_self_test


ABC_DIGEST = "BA7816BF8F01CFEA414140DE5DAE2223B00361A396177A9CB410FF61F20015AD"


class TestCommandLine:
    """End-to-end CLI behavior."""

    def test_hashes_arguments(self, capsys):
        """Each argument is printed with its digest."""
        assert main(["abc", ""]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == f"{ABC_DIGEST}  abc"
        assert lines[1].startswith("E3B0C442")

    def test_reads_stdin(self, capsys, monkeypatch):
        """With no arguments, each stdin line is hashed."""
        monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
        assert main([]) == 0
        assert capsys.readouterr().out.strip() == f"{ABC_DIGEST}  abc"

    def test_reads_crlf_stdin(self, capsys, monkeypatch):
        """Windows line endings are stripped before hashing."""
        monkeypatch.setattr("sys.stdin", io.StringIO("abc\r\n"))
        assert main([]) == 0
        assert capsys.readouterr().out.strip() == f"{ABC_DIGEST}  abc"

    def test_forced_pure_provider(self, capsys):
        """--provider pure gives the same digest."""
        assert main(["--provider", "pure", "abc"]) == 0
        assert capsys.readouterr().out.startswith(ABC_DIGEST)

    def test_unavailable_provider_exit_code(self, capsys, monkeypatch):
        """Provider errors exit with status 2 and a message on stderr."""
        from digestkit.providers.digest_providers import OpenSSLProvider
        monkeypatch.setattr(OpenSSLProvider, "is_available", lambda self: False)
        assert main(["--provider", "openssl", "abc"]) == 2
        assert "not available" in capsys.readouterr().err

    def test_self_test_passes(self, capsys):
        """--self-test succeeds on every available provider."""
        assert main(["--self-test"]) == 0
        out = capsys.readouterr().out
        assert "FAIL" not in out
        assert "pure" in out

    def test_run_self_test_output(self):
        """run_self_test writes one line per provider and vector."""
        out = io.StringIO()
        assert run_self_test(out=out)
        assert all(line.startswith("PASS") for line in out.getvalue().splitlines())
