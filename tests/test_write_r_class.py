from __future__ import annotations

import pytest

from conftest import HEADER, make_styleable, make_table, make_type
from resgen.codegen import collect_packages, r_class_path, write_r_class
from resgen.mangler import mangle_entry
from resgen.table import ResourceType


def _merged_table():
    return make_table(
        [
            make_type(
                ResourceType.ID,
                1,
                [
                    "own",
                    mangle_entry("com.zeta", "z"),
                    mangle_entry("com.alpha", "a"),
                    mangle_entry("com.alpha", "b"),
                    mangle_entry("com.example.app", "self"),
                ],
            )
        ],
        package="com.example.app",
    )


def test_collect_packages_puts_table_package_first():
    assert collect_packages(_merged_table()) == ["com.example.app", "com.alpha", "com.zeta"]


def test_r_class_path(tmp_path):
    assert r_class_path(tmp_path, "com.example.app") == tmp_path / "com" / "example" / "app" / "R.java"


def test_write_r_class_creates_package_directories(tmp_path):
    result = write_r_class(_merged_table(), tmp_path, "com.alpha")

    path = tmp_path / "com" / "alpha" / "R.java"
    assert result.success
    assert result.metadata["output_file"] == str(path)
    code = path.read_text(encoding="utf-8")
    assert code.startswith(HEADER + "package com.alpha;\n")
    assert "int a = 0x7f010002;" in code
    assert "int b = 0x7f010003;" in code
    assert "own" not in code


def test_write_r_class_uses_config_package(tmp_path):
    result = write_r_class(_merged_table(), tmp_path, config={"package_name": "com.zeta"})

    assert result.success
    assert "int z = 0x7f010001;" in (tmp_path / "com" / "zeta" / "R.java").read_text(encoding="utf-8")


def test_write_r_class_removes_partial_file(tmp_path):
    table = make_table([make_type(ResourceType.ID, 1, ["fine", "while"])])

    result = write_r_class(table, tmp_path)

    assert not result.success
    assert result.error_message == "invalid symbol name 'app:id/while'"
    assert not r_class_path(tmp_path, "app").exists()


def test_write_r_class_removes_partial_file_when_assertion_escapes(tmp_path):
    table = make_table([make_type(ResourceType.ID, 1, ["fine"])], package_id=0)

    with pytest.raises(AssertionError, match="invalid id"):
        write_r_class(table, tmp_path)

    assert not r_class_path(tmp_path, "app").exists()


def test_write_r_class_removes_partial_file_for_unset_attribute_id(tmp_path):
    styleables = make_type(ResourceType.STYLEABLE, 1, ["Theme"])
    styleables.entries[0].values.append(make_styleable([(0x0000000A, "app:attr/a")]))

    with pytest.raises(AssertionError, match="no ID set for Styleable entry in Theme"):
        write_r_class(make_table([styleables]), tmp_path)

    assert not r_class_path(tmp_path, "app").exists()


def test_write_r_class_overwrites_stale_file(tmp_path):
    path = r_class_path(tmp_path, "app")
    path.parent.mkdir(parents=True)
    path.write_text("stale", encoding="utf-8")

    result = write_r_class(make_table([make_type(ResourceType.ID, 1, ["fresh"])]), tmp_path)

    assert result.success
    assert "int fresh = 0x7f010000;" in path.read_text(encoding="utf-8")
