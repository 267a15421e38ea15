"""Shared fixtures for core unit tests"""

import pytest

from mdrender.config import Settings
from mdrender.core.outline import HeadingRecorder
from mdrender.core.render.render import Renderer


SAMPLE_MD = """\
{:shortdesc: .shortdesc}
# Title
{:#intro}
{:shortdesc}

Intro paragraph, it's here.
{: title='note'}

| a | b |
|---|---|
| 1 | 2 |
{:.data}

- item
  continued

## Details[^fn]

Body.

[^fn]: A footnote.
"""


@pytest.fixture(name="renderer")
def renderer_fixture():
    return Renderer(Settings())


@pytest.fixture(name="recorder")
def recorder_fixture():
    return HeadingRecorder()


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
