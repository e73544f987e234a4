import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from moodboard.config import MoodboardConfig, LLMConfig, OutputConfig, OutputFormat


# "boho dress" and "plain shirt" contain fashion keywords, "sneakers" does not.
KEYWORD_CSV = 'title,platform,engagement\n"boho dress",TikTok,120\n"sneakers",Instagram,340\n"plain shirt",X,5'

# No row contains a fashion keyword, so the whole dataset is analyzed.
NO_KEYWORD_CSV = 'title,platform,engagement\n"linen tunic",TikTok,120\n"sneakers",Instagram,340\n"plain tee",X,5'

INSIGHTS_PAYLOAD = {
    "analysisSummary": "Boho dresses lead engagement on TikTok.",
    "futurePredictions": ["Boho revival", "Linen everything", "Shirt dresses"],
    "strategicRecommendations": ["Post on TikTok", "Seed creators", "Bundle accessories"],
}


@pytest.fixture(autouse=True)
def no_openai_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


@pytest.fixture
def keyword_csv():
    return KEYWORD_CSV


@pytest.fixture
def no_keyword_csv():
    return NO_KEYWORD_CSV


@pytest.fixture
def config(tmp_path):
    return MoodboardConfig(
        llm=LLMConfig(api_key=None, retry_attempts=2),
        output=OutputConfig(format=OutputFormat.MARKDOWN, output_dir=str(tmp_path / "output")),
    )


def make_completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def llm_client():
    client = MagicMock()
    client.chat.completions.create.return_value = make_completion(json.dumps(INSIGHTS_PAYLOAD))
    return client


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "trends.csv"
    path.write_text(KEYWORD_CSV, encoding="utf-8")
    return path


@pytest.fixture
def insights_payload():
    return dict(INSIGHTS_PAYLOAD)
