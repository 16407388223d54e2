"""
Tests for upload file naming and storage.
"""
import io
import re

from medvibe.core.uploads import (
    build_upload_filename,
    remove_upload,
    sanitize_filename,
    save_upload,
)


def test_plain_name_is_kept():
    assert sanitize_filename("laudo.pdf") == "laudo.pdf"


def test_directory_components_are_dropped():
    assert sanitize_filename("../../etc/passwd") == "passwd"
    assert sanitize_filename("C:\\Users\\ana\\exame.png") == "exame.png"


def test_unicode_is_folded_to_ascii():
    assert sanitize_filename("resultado de exâme ção.pdf") == "resultado_de_exame_cao.pdf"


def test_unsafe_characters_are_replaced():
    assert sanitize_filename("hemo;rm -rf *.pdf") == "hemo_rm_-rf_.pdf"


def test_empty_and_dot_names_fall_back():
    for name in (None, "", "   ", ".", "..", "/", "漢字"):
        assert sanitize_filename(name) == "arquivo"


def test_hidden_file_prefix_is_stripped():
    assert sanitize_filename(".env") == "env"


def test_long_names_keep_extension():
    name = sanitize_filename("a" * 300 + ".pdf")
    assert len(name) == 100
    assert name.endswith(".pdf")


def test_generated_name_has_time_random_and_original():
    name = build_upload_filename("laudo.pdf", now=1700000000.5)
    assert re.fullmatch(r"1700000000500-[0-9a-f]{8}-laudo\.pdf", name)


def test_generated_names_do_not_collide_for_same_upload_time():
    names = {build_upload_filename("laudo.pdf", now=1700000000.0) for _ in range(50)}
    assert len(names) == 50


def test_save_and_remove_upload(tmp_path):
    upload_dir = tmp_path / "novo" / "uploads"
    reference = save_upload(io.BytesIO(b"conteudo"), "exame.txt", str(upload_dir))

    assert reference.startswith("uploads/")
    stored = upload_dir / reference.split("/", 1)[1]
    assert stored.read_bytes() == b"conteudo"

    remove_upload(reference, str(upload_dir))
    assert not stored.exists()
    remove_upload(reference, str(upload_dir))
