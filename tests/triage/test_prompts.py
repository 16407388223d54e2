"""
Tests for the triage prompt assembly.
"""
from medvibe.triage.prompts import ALARM_SIGNS, NOT_INFORMED, SEVERITY_LEVELS, build_triage_prompt


def test_prompt_contains_clinical_sections():
    prompt = build_triage_prompt("Febre há 4 dias", "Hipertensa", "Tipo: Hemograma | Resultado: Hb 11")

    assert "SINTOMAS:\nFebre há 4 dias" in prompt
    assert "ANAMNESE:\nHipertensa" in prompt
    assert "EXAMES DISPONÍVEIS:\nTipo: Hemograma | Resultado: Hb 11" in prompt


def test_missing_sections_use_placeholder():
    prompt = build_triage_prompt("Tosse seca", None, "   ")

    assert f"ANAMNESE:\n{NOT_INFORMED}" in prompt
    assert prompt.endswith(f"EXAMES DISPONÍVEIS:\n{NOT_INFORMED}")


def test_prompt_lists_closed_vocabularies():
    prompt = build_triage_prompt("Tosse", "", "")

    for level in SEVERITY_LEVELS:
        assert f'"{level}"' in prompt
    for sign in ALARM_SIGNS:
        assert f"- {sign}\n" in prompt
    assert '"gravidade": "baixa|moderada|alta|indefinida"' in prompt


def test_prompt_states_output_contract():
    prompt = build_triage_prompt("Tosse", "", "")

    assert "JSON" in prompt
    assert "diagnóstico definitivo" in prompt
    for key in ("hipoteses", "sinais_alarme", "justificativa", "recomendacao", "exames_sugeridos", "confianca"):
        assert f'"{key}"' in prompt
