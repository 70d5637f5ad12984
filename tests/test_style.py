import io

from mirrorswap.style import (
    Level,
    Style,
    format_bracket,
    format_log,
    log,
    log_bracket,
    log_bracket_to,
    styled,
)


def test_styled_colours():
    assert styled(Style.RED, "红色") == "\x1b[31m红色\x1b[0m"
    assert styled(Style.CYAN, "青色") == "\x1b[36m青色\x1b[0m"
    assert styled(Style.BOLD, "粗体") == "\x1b[1m粗体\x1b[0m"
    assert styled(Style.CROSS, "删除线") == "\x1b[9m删除线\x1b[0m"


def test_styled_without_colour_is_plain():
    assert styled(Style.GREEN, "绿色", color=False) == "绿色"


def test_purple_is_magenta():
    assert styled(Style.PURPLE, "紫色") == styled(Style.MAGENTA, "紫色")
    assert Style.PURPLE is Style.MAGENTA


def test_format_log_plain_and_coloured():
    assert format_log(Level.PLAIN, "普通", "输出普通内容") == "普通: 输出普通内容"
    assert format_log(Level.SUCCESS, "成功", "输出成功内容") == "成功: \x1b[32m输出成功内容\x1b[0m"
    assert format_log(Level.ERROR, "错误", "输出错误内容", color=False) == "错误: 输出错误内容"


def test_log_routes_by_level(capsys):
    log(Level.INFO, "信息", "输出信息内容", color=False)
    log(Level.WARN, "警告", "输出警告内容", color=False)
    out, err = capsys.readouterr()
    assert out == "信息: 输出信息内容\n"
    assert err == "警告: 输出警告内容\n"


def test_format_bracket_plain():
    text = format_bracket(Level.PLAIN, "xy.h", "普通", "咸阳油泼面筋道十足辣子香")
    assert text == "[xy.h 普通] 咸阳油泼面筋道十足辣子香"


def test_format_bracket_coloured_wraps_tag_in_bold():
    text = format_bracket(Level.INFO, "xy.h", "信息", "x")
    assert text == (
        "[" + styled(Style.BLUE, "xy.h") + " "
        + styled(Style.BOLD, styled(Style.BLUE, "信息")) + "] "
        + styled(Style.BLUE, "x")
    )


def test_format_bracket_without_colour_matches_plain():
    assert format_bracket(Level.ERROR, "a", "b", "c", color=False) == format_bracket(
        Level.PLAIN, "a", "b", "c"
    )


def test_log_bracket_routes_errors_to_stderr(capsys):
    log_bracket(Level.ERROR, "xy.h", "错误", "西安肉丸胡辣汤里没有肉丸", color=False)
    log_bracket(Level.SUCCESS, "xy.h", "成功", "ok", color=False)
    out, err = capsys.readouterr()
    assert err == "[xy.h 错误] 西安肉丸胡辣汤里没有肉丸\n"
    assert out == "[xy.h 成功] ok\n"


def test_log_bracket_to_stream():
    buf = io.StringIO()
    log_bracket_to("app", "content", buf)
    assert buf.getvalue() == "[app] content\n"


def test_only_warn_and_error_reach_stderr(capsys):
    to_stderr = []
    for level in Level:
        log(level, "p", "c", color=False)
        out, err = capsys.readouterr()
        if err:
            assert out == ""
            to_stderr.append(level)
    assert to_stderr == [Level.WARN, Level.ERROR]