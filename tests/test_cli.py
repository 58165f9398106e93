from src.cli import main


class TestCli:
    def test_level_payment_in_ten_thousands(self, capsys):
        code = main([
            "--method", "equal-principal-interest",
            "--wan", "100", "--rate", "4.5", "--years", "30",
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "¥1,000,000.00" in out
        assert "¥5,066.85" in out

    def test_declining_payment_plain_amount(self, capsys):
        code = main([
            "--method", "equal-principal",
            "--amount", "1000000", "--rate", "4.5", "--years", "30",
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "First Month Payment" in out
        assert "¥6,527.78" in out

    def test_invalid_years(self, capsys):
        code = main([
            "--method", "equal-principal",
            "--amount", "1000000", "--rate", "4.5", "--years", "15",
        ])
        captured = capsys.readouterr()
        assert code == 2
        assert "10, 20 or 30" in captured.err
        assert captured.out == ""
