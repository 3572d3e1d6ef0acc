"""
Unit Tests for Guidance Engine
"""

import pytest
import yaml

from copsoq.domain.catalog import DOMAIN_CATALOG
from copsoq.domain.exceptions import GuidanceConfigError
from copsoq.domain.models import Direction, RiskCategory
from copsoq.domain.services.guidance_engine import GuidanceEngine, score_level


def _write_guidance(path, domains, version="test"):
    path.write_text(yaml.safe_dump({"version": version, "domains": domains}), encoding="utf-8")
    return path


def _entry(domain_id, **overrides):
    entry = {
        "id": domain_id,
        "explanation": "Explicação",
        "management": "Gestão",
        "levels": {"baixo": "B", "medio": "M", "alto": "A"},
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def guidance():
    """Fixture for the packaged guidance"""
    return GuidanceEngine().load()


class TestPackagedGuidance:

    def test_loads_all_domains(self, guidance):
        assert guidance.version == "2025-11"
        for domain_id in range(1, 11):
            assert guidance.get(domain_id).levels["medio"]

    def test_negative_high_risk_reads_high_level(self, guidance, score_factory):
        score = score_factory(1, "Demandas no Trabalho", 80.0, RiskCategory.HIGH, Direction.NEGATIVE)
        assert guidance.guidance_for(score).startswith("Demanda muito alta")

    def test_positive_high_risk_reads_low_level(self, guidance, score_factory):
        score = score_factory(2, "Organização e Conteúdo do Trabalho", 20.0, RiskCategory.HIGH)
        assert guidance.guidance_for(score).startswith("Pouca liberdade")

    def test_unknown_domain(self, guidance):
        with pytest.raises(ValueError, match="No guidance"):
            guidance.get(42)

    def test_names_match_catalog(self, guidance):
        for domain in DOMAIN_CATALOG:
            assert guidance.get(domain.id).name == domain.name

    def test_sheet_for_high_risk_domain(self, guidance, score_factory):
        score = score_factory(2, "Organização e Conteúdo do Trabalho", 20.0, RiskCategory.HIGH)

        sheet = guidance.sheet_for(score)

        assert sheet.domain_id == 2
        assert sheet.name == "Organização e Conteúdo do Trabalho"
        assert sheet.level == "baixo"
        assert sheet.explanation.startswith("Quanto o trabalhador decide")
        assert sheet.management.startswith("Estimular sugestões")
        assert sheet.guidance == guidance.guidance_for(score)

    def test_not_loaded(self):
        with pytest.raises(RuntimeError, match="not loaded"):
            GuidanceEngine().get(1)


class TestScoreLevel:

    @pytest.mark.parametrize("category,direction,expected", [
        (RiskCategory.LOW, Direction.NEGATIVE, "baixo"),
        (RiskCategory.HIGH, Direction.NEGATIVE, "alto"),
        (RiskCategory.LOW, Direction.POSITIVE, "alto"),
        (RiskCategory.HIGH, Direction.POSITIVE, "baixo"),
        (RiskCategory.MEDIUM, Direction.POSITIVE, "medio"),
    ])
    def test_mapping(self, category, direction, expected):
        assert score_level(category, direction) == expected


class TestInvalidGuidance:
    """Fail fast on broken guidance files"""

    def test_missing_file(self, tmp_path):
        with pytest.raises(GuidanceConfigError, match="not found"):
            GuidanceEngine(tmp_path / "missing.yml").load()

    def test_domains_not_a_list(self, tmp_path):
        path = tmp_path / "guidance.yml"
        path.write_text("domains: {}\n", encoding="utf-8")

        with pytest.raises(GuidanceConfigError, match="Expected a 'domains' list"):
            GuidanceEngine(path).load()

    def test_missing_domain(self, tmp_path):
        path = _write_guidance(tmp_path / "guidance.yml", [_entry(i) for i in range(1, 10)])

        with pytest.raises(GuidanceConfigError, match=r"missing for domains: \[10\]"):
            GuidanceEngine(path).load()

    def test_duplicate_domain(self, tmp_path):
        entries = [_entry(i) for i in range(1, 11)] + [_entry(3)]
        path = _write_guidance(tmp_path / "guidance.yml", entries)

        with pytest.raises(GuidanceConfigError, match="Duplicate"):
            GuidanceEngine(path).load()

    def test_missing_level(self, tmp_path):
        entries = [_entry(i) for i in range(1, 10)]
        entries.append(_entry(10, levels={"baixo": "B", "medio": "M"}))
        path = _write_guidance(tmp_path / "guidance.yml", entries)

        with pytest.raises(GuidanceConfigError, match="missing levels"):
            GuidanceEngine(path).load()

    def test_name_must_match_catalog(self, tmp_path):
        entries = [_entry(i) for i in range(2, 11)]
        entries.insert(0, _entry(1, name="Demandas do Trabalho"))
        path = _write_guidance(tmp_path / "guidance.yml", entries)

        with pytest.raises(GuidanceConfigError, match="does not match catalog"):
            GuidanceEngine(path).load()

    def test_unknown_domain_id(self, tmp_path):
        entries = [_entry(i) for i in range(1, 11)] + [_entry(11)]
        path = _write_guidance(tmp_path / "guidance.yml", entries)

        with pytest.raises(GuidanceConfigError, match="unknown domain: 11"):
            GuidanceEngine(path).load()

    def test_custom_file(self, tmp_path):
        path = _write_guidance(tmp_path / "guidance.yml", [_entry(i) for i in range(1, 11)], "v2")

        engine = GuidanceEngine(path).load()

        assert engine.version == "v2"
        assert engine.get(7).for_level("alto") == "A"
        assert engine.get(7).name == "Saúde e Bem-Estar"
