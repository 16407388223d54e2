"""
Clinical triage prompt sent to the inference service.

The constraints written here are instructions to the model; nothing in
this module enforces them on the answer.
"""
from typing import Optional

NOT_INFORMED = "(não informado)"

SEVERITY_LEVELS = ("baixa", "moderada", "alta", "indefinida")

ALARM_SIGNS = (
    "dispneia",
    "SpO2 < 95%",
    "dor torácica",
    "confusão mental",
    "síncope",
    "rigidez de nuca",
    "hemoptise",
    "sinais de sepse",
    "desidratação grave",
    "piora rápida",
    "febre persistente",
    "vômitos persistentes",
    "sangramento ativo",
    "déficit neurológico focal",
)

TRIAGE_PROMPT_TEMPLATE = """
Você é um assistente clínico de triagem que segue as diretrizes do Ministério da Saúde do Brasil e da Organização Mundial da Saúde (OMS).
Responda sempre em português do Brasil.

REGRAS OBRIGATÓRIAS:
- Não forneça diagnóstico definitivo nem prescreva medicamentos.
- Use somente os dados informados abaixo; não invente sinais, sintomas ou resultados.
- Se faltarem dados para avaliar, declare a incerteza explicitamente.
- Responda com UM ÚNICO objeto JSON válido, sem texto antes ou depois.

CLASSIFICAÇÃO DE GRAVIDADE (escolha exatamente uma: {severities}):
- "alta": SpO2 < 95%, desconforto respiratório moderado/grave, dor ou pressão torácica, confusão mental, síncope, rigidez de nuca, hemoptise, sinais de sepse, desidratação grave ou piora rápida.
- "moderada": febre sustentada há 3 dias ou mais, dor torácica moderada, vômitos persistentes, diarreia moderada, dor localizada intensa sem sinais de alarme.
- "baixa": sintomas leves e autolimitados.
- "indefinida": dados insuficientes para classificar.

SINAIS DE ALARME (selecione zero ou mais, somente desta lista):
{alarm_signs}

FORMATO DA RESPOSTA:
{{
  "hipoteses": ["hipótese mais provável", "hipótese alternativa"],
  "gravidade": "{severity_choices}",
  "sinais_alarme": ["itens da lista acima"],
  "justificativa": "resumo clínico em até 50 palavras",
  "recomendacao": "orientação prática em até 160 caracteres",
  "exames_sugeridos": ["no máximo 3 exames"],
  "confianca": 0.0
}}
O campo "confianca" é um número entre 0 e 1. O campo "exames_sugeridos" é opcional.

SINTOMAS:
{sintomas}

ANAMNESE:
{anamnese}

EXAMES DISPONÍVEIS:
{exames}
"""


def _section(value: Optional[str]) -> str:
    if value is None:
        return NOT_INFORMED
    value = value.strip()
    return value or NOT_INFORMED


def build_triage_prompt(sintomas: Optional[str], anamnese: Optional[str], exames_resumo: Optional[str]) -> str:
    """
    Assemble the triage instruction for the given clinical data.

    Empty sections are rendered as "(não informado)" so the model always
    sees the full template.

    Args:
        sintomas: Patient symptoms
        anamnese: Patient anamnesis
        exames_resumo: Exam summary text

    Returns:
        str: Prompt text
    """
    return TRIAGE_PROMPT_TEMPLATE.format(
        severities=", ".join(f'"{level}"' for level in SEVERITY_LEVELS),
        severity_choices="|".join(SEVERITY_LEVELS),
        alarm_signs="\n".join(f"- {sign}" for sign in ALARM_SIGNS),
        sintomas=_section(sintomas),
        anamnese=_section(anamnese),
        exames=_section(exames_resumo),
    ).strip()
