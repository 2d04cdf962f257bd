"""
Tests for models.py - pydantic result models.
"""

import json

import ithkuil_gloss
from ithkuil_gloss.glosses import Error
from ithkuil_gloss.models import BatchResult, GlossResult


class TestGlossResult:

    def test_from_gloss(self):
        result = GlossResult.from_outcome("khe", ithkuil_gloss.decode("khe"))
        assert result.ok
        assert result.gloss == "Obv/DET-ABS"
        assert result.error is None
        assert result.word_type == "referential"
        assert str(result) == "Obv/DET-ABS"

    def test_from_gloss_with_settings(self):
        outcome = ithkuil_gloss.decode("khe")
        result = GlossResult.from_outcome("khe", outcome, precision=2)
        assert result.gloss == "obviative/detrimental-absolutive"

    def test_from_error(self):
        result = GlossResult.from_outcome("ëha", Error("Unknown VnCn: ëh"))
        assert not result.ok
        assert result.gloss is None
        assert result.word_type is None
        assert str(result) == "Error: Unknown VnCn: ëh"

    def test_model_dump(self):
        data = ithkuil_gloss.gloss("alartřa").model_dump()
        assert data == {
            "word": "alartřa",
            "gloss": "S1-**l**-DSS/RPV",
            "error": None,
            "word_type": "formative",
            "stress": "penultimate",
        }


class TestBatchResult:

    def test_counts(self):
        batch = BatchResult(results=[
            GlossResult(word="khe", gloss="Obv/DET-ABS"),
            GlossResult(word="ëha", error="Unknown VnCn: ëh"),
        ])
        assert batch.count == 2
        assert batch.error_count == 1
        assert batch.precision == 1

    def test_json(self):
        batch = ithkuil_gloss.gloss_many(["khe"], precision=0, ignore_defaults=False)
        data = json.loads(batch.model_dump_json())
        assert data["precision"] == 0
        assert data["ignore_defaults"] is False
        assert data["results"][0]["word"] == "khe"
