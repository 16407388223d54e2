"""
Tests for parsing the model output into a suggestion.
"""
from medvibe.triage.interpreter import interpret_response


def test_strict_json_is_returned_verbatim():
    raw = '{"hipoteses":["a"],"gravidade":"baixa"}'
    assert interpret_response(raw) == {"hipoteses": ["a"], "gravidade": "baixa"}


def test_object_surrounded_by_text_is_extracted():
    assert interpret_response('noise {"hipoteses":["a"]} trailing') == {"hipoteses": ["a"]}


def test_fenced_json_is_extracted():
    raw = 'Segue a análise:\n```json\n{"gravidade": "alta", "sinais_alarme": ["dispneia"]}\n```'
    assert interpret_response(raw) == {"gravidade": "alta", "sinais_alarme": ["dispneia"]}


def test_plain_text_is_wrapped():
    assert interpret_response("not json at all") == {"texto": "not json at all"}


def test_non_object_json_is_wrapped():
    assert interpret_response("[1, 2, 3]") == {"texto": "[1, 2, 3]"}
    assert interpret_response('"so uma string"') == {"texto": '"so uma string"'}


def test_several_objects_fall_back_to_text():
    # The object span runs from the first "{" to the last "}", which is not
    # valid JSON when the model emits two separate objects.
    raw = 'primeiro {"gravidade": "baixa"} depois {"gravidade": "alta"}'
    assert interpret_response(raw) == {"texto": raw}


def test_braces_in_prose_before_the_answer_fall_back_to_text():
    # Same limit: the span starts at the first "{", here inside the prose.
    raw = 'Considere {exemplo}. Resposta: {"hipoteses":["a"]}'
    assert interpret_response(raw) == {"texto": raw}


def test_nested_objects_are_extracted_whole():
    raw = 'Resposta: {"hipoteses": ["a"], "detalhes": {"confianca": 0.4}}'
    assert interpret_response(raw) == {"hipoteses": ["a"], "detalhes": {"confianca": 0.4}}


def test_unbalanced_braces_fall_back_to_text():
    raw = '{"hipoteses": ["a"'
    assert interpret_response(raw) == {"texto": raw}
