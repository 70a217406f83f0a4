from __future__ import annotations

import logging
from pathlib import Path

import pytest

from enumforge.config import GeneratorConfig
from enumforge.normalizer import NormalizedConstant, normalize_constants
from enumforge.renderer import EnumerableRenderer, render_enumerable
from enumforge.schema import GenerationRequest

EXPECTED_SUBSCRIPTION = """<?php

namespace app\\models;

use yii2mod\\enum\\helpers\\BaseEnum;

/**
 * @author Jane Doe
 * Subscription plans
 */
class Subscription extends BaseEnum
{
    const FREE = 0;
    const PAID = 1;
    const FREE_TRIAL = 2;

    public static $list = [
        self::FREE => 'Free',
        self::PAID => 'Paid',
        self::FREE_TRIAL => 'Free Trial',
    ];
}
"""


def test_render_full_class():
    rendered = render_enumerable(
        "Subscription",
        normalize_constants("free, paid, free trial"),
        namespace="app\\models",
        author="Jane Doe",
        description="Subscription plans",
    )
    assert rendered == EXPECTED_SUBSCRIPTION


def test_constant_values_start_at_zero():
    constants = [NormalizedConstant("FREE", 0), NormalizedConstant("PAID", 1)]
    rendered = render_enumerable("Plan", constants, start=0)
    assert "    const FREE = 0;\n    const PAID = 1;\n" in rendered
    assert rendered.index("self::FREE =>") < rendered.index("self::PAID =>")
    assert rendered.count("self::") == 2


def test_constant_values_are_offset_by_start():
    rendered = render_enumerable("Plan", normalize_constants("free, paid"), start=5)
    assert "const FREE = 5;" in rendered
    assert "const PAID = 6;" in rendered


def test_negative_start():
    rendered = render_enumerable("Plan", normalize_constants("low, high"), start=-1)
    assert "const LOW = -1;" in rendered
    assert "const HIGH = 0;" in rendered


def test_empty_constants_render_empty_class():
    rendered = render_enumerable("Status", [])
    assert "const " not in rendered
    assert "namespace" not in rendered
    assert rendered.endswith(
        "class Status extends BaseEnum\n{\n    public static $list = [];\n}\n"
    )
    assert rendered.count("{") == rendered.count("}")
    assert rendered.count("[") == rendered.count("]")


def test_namespace_line_only_when_given():
    with_ns = render_enumerable("Plan", [], namespace="app.models.enums")
    without_ns = render_enumerable("Plan", [], namespace="  ")
    assert "namespace app\\models\\enums;" in with_ns
    assert "namespace" not in without_ns
    assert without_ns.startswith("<?php\n\nuse yii2mod")


def test_doc_block_keeps_text_but_cannot_be_closed_early():
    rendered = render_enumerable("Plan", [], author="O'Brien", description="Closes */ here")
    assert " * @author O'Brien\n" in rendered
    assert " * Closes *\\/ here\n" in rendered
    assert rendered.count("*/") == 1


def test_configured_base_class():
    config = GeneratorConfig(base_class="App\\Support\\Enum")
    rendered = EnumerableRenderer(config).render_source("Plan", [])
    assert "use App\\Support\\Enum;" in rendered
    assert "class Plan extends Enum\n" in rendered


def test_custom_skeleton_template(tmp_path: Path):
    template = tmp_path / "skeleton.txt"
    template.write_text("{{ class_name }} < {{ base_name }}\n{{ body }}\n", encoding="utf-8")
    renderer = EnumerableRenderer(GeneratorConfig(template=template))
    rendered = renderer.render_source("Plan", normalize_constants("free"))
    assert rendered.startswith("Plan < BaseEnum\n    const FREE = 0;\n")


@pytest.mark.parametrize("sort, expected", [(False, ["PAID", "FREE"]), (True, ["FREE", "PAID"])])
def test_render_from_request(sort, expected):
    request = GenerationRequest(
        class_id="plan-type",
        values="paid, free",
        namespace="app/models",
        author="Jane",
        description="Plans",
        start=3,
        sort=sort,
    )
    constants = normalize_constants(request.values, sort=request.sort)
    rendered = EnumerableRenderer().render(request, constants)
    assert "class PlanType extends BaseEnum" in rendered
    assert "namespace app\\models;" in rendered
    assert f"const {expected[0]} = 3;" in rendered
    assert f"const {expected[1]} = 4;" in rendered


def test_custom_skeleton_can_filter_raw_values(tmp_path: Path):
    template = tmp_path / "skeleton.txt"
    template.write_text(
        "namespace {{ namespace|namespace }}; // {{ class_name|constant }} from {{ start }}\n",
        encoding="utf-8",
    )
    renderer = EnumerableRenderer(GeneratorConfig(template=template))
    rendered = renderer.render_source("Plan", [], start=7, namespace="app.models")
    assert rendered == "namespace app\\models; // PLAN from 7\n"


def test_colliding_constant_names_are_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.WARNING, logger="enumforge.renderer"):
        rendered = render_enumerable("Plan", normalize_constants("Free, free, paid"))
    assert rendered.count("const FREE = ") == 2
    assert "FREE" in caplog.text
    assert "collide" in caplog.text


def test_distinct_constant_names_log_nothing(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.WARNING, logger="enumforge.renderer"):
        render_enumerable("Plan", normalize_constants("free, paid"))
    assert caplog.records == []


def test_request_without_metadata_uses_config_defaults():
    config = GeneratorConfig(namespace="common.enums", author="Jane", description="Generated")
    request = GenerationRequest(class_id="plan", values="free", start=0)
    rendered = EnumerableRenderer(config).render(request, normalize_constants(request.values))
    assert "namespace common\\enums;" in rendered
    assert " * @author Jane\n" in rendered
    assert " * Generated\n" in rendered
