from datetime import datetime
from unittest import mock

import pytest

from atribot import zhiwang

NOW = datetime(2022, 7, 3, 18, 24, 34)


def _result(content, rate=0.5):
    return {
        "code": 0,
        "data": {
            "related": [
                {
                    "rate": rate,
                    "reply_url": "https://example.com/reply",
                    "reply": {"content": content, "like_num": 12, "m_name": "author",
                              "ctime": 1656843874},
                }
            ]
        },
    }


def test_is_check_request():
    assert zhiwang.is_check_request([("reply", {"id": "1"}), ("text", {"text": " 查 重\n"})])
    assert not zhiwang.is_check_request([("text", {"text": "查重"})])
    assert not zhiwang.is_check_request([("reply", {"id": "1"}), ("text", {"text": "hi"})])
    assert not zhiwang.is_check_request([])


def test_error_code_raises():
    with pytest.raises(ValueError, match="api返回错误"):
        zhiwang.format_report({"code": 1}, NOW)


def test_no_related_is_original():
    assert zhiwang.format_report({"code": 0, "data": {"related": []}}, NOW) == zhiwang.ORIGINAL


def test_report_lines():
    lines = zhiwang.format_report(_result("short"), NOW).split("\n")
    assert lines[0] == "枝网文本复制检测报告(简洁)"
    assert lines[1] == "查重时间: 2022-07-03 18:24:34"
    assert lines[2] == "总文字复制比: 50%"
    assert lines[4] == "short"
    assert lines[5] == "获赞数：12"
    assert lines[6] == "https://example.com/reply"
    assert lines[7] == "作者: author"
    assert lines[-1] == "数据来源: https://asoulcnki.asia/"


def test_long_content_truncated():
    report = zhiwang.format_report(_result("a" * 200), NOW)
    assert "a" * zhiwang.MAX_CONTENT + "....." in report
    assert "a" * (zhiwang.MAX_CONTENT + 1) not in report


@mock.patch("atribot.zhiwang.requests.post")
def test_check_posts_text(post):
    post.return_value = mock.Mock(content=b'{"code": 0, "data": {"related": []}}')
    result = zhiwang.check('say "hi"')
    assert result["code"] == 0
    assert post.call_args.kwargs["json"] == {"text": 'say "hi"'}
    assert post.call_args.args[0] == zhiwang.CHECK_URL