import pytest

from layoutlens.core.parsing import (
    MissingLayoutDataError,
    MissingRootError,
    XmlSyntaxError,
    parse_combined,
)
from tests.xml_builders import (
    col,
    final_output,
    layout_doc,
    layouts_section,
    new_edit_group,
    section,
)


def test_parse_combined_builds_every_registry(sample_export):
    result = parse_combined(sample_export)

    assert list(result.fields) == ["42", "firstName", "lastName"]
    badge = result.fields["42"]
    assert badge.layout_label == "Badge"
    assert badge.section == "Personal Data"
    assert badge.dependency_contexts == ["newEdit", "detail"]
    assert [d.to_dict() for d in badge.dependencies] == [
        {"onValue": "Y", "childFields": ["cust_43", "44", "45"]},
        {"onValue": "N", "childFields": ["46"]},
    ]

    first_name = result.fields["firstName"]
    assert first_name.layout_label == "First Name"
    assert first_name.visibility_options == ["Employee"]
    assert first_name.layouts["newEdit"].is_read_only is True

    assert result.fields["lastName"].layout_label == "Last Name"

    assert {k: v.profile_name for k, v in result.profiles.items()} == {
        "10": "HR Admin", "20": "Manager", "30": "Employee",
    }
    assert list(result.cards) == ["Employee Central: HR Admin-Personal"]
    assert list(result.buttons) == ["btnApprove"]
    assert result.db_fields["42"].lovs == ["A", "B", "C"]
    assert result.db_fields["firstName"].column_name == "EMP.FNAME"
    assert result.skipped_layouts == 0


def test_field_record_wire_shape(sample_export):
    record = parse_combined(sample_export).fields["42"].to_dict()

    assert record["fieldId"] == "42"
    assert record["originalId"] == "cust_42"
    assert record["layouts"]["newEdit"] == {"isRequired": "Yes", "isReadOnly": "No", "isHidden": "No"}
    assert record["layouts"]["detail"] == {"isRequired": "No", "isReadOnly": "No", "isHidden": "Yes"}
    assert record["visibilityOptions"] is None
    assert record["dbInfo"] is None
    assert record["lovs"] == {"database": None, "layout": None, "dependency": None}


def test_fields_section_is_optional():
    xml = final_output(layouts_section(new_edit_group("1", layout_doc("A: B", section("S", col("f"))))))

    result = parse_combined(xml)

    assert list(result.fields) == ["f"]
    assert dict(result.db_fields) == {}


def test_final_output_may_be_nested():
    xml = f"<Result>{final_output(layouts_section())}</Result>"

    assert dict(parse_combined(xml).fields) == {}


def test_syntax_error():
    with pytest.raises(XmlSyntaxError) as exc_info:
        parse_combined("<FinalOutput><Layouts>")

    assert exc_info.value.message.startswith("XML parsing error.")


def test_missing_root():
    with pytest.raises(MissingRootError) as exc_info:
        parse_combined("<Other/>")

    assert "<FinalOutput>" in exc_info.value.message


def test_missing_layout_data():
    with pytest.raises(MissingLayoutDataError):
        parse_combined("<FinalOutput><Layouts/><Fields><Fields/></Fields></FinalOutput>")


def test_result_registries_are_read_only(sample_export):
    result = parse_combined(sample_export)

    with pytest.raises(TypeError):
        result.fields["new"] = None


def test_namespaced_outer_document():
    xml = (
        '<FinalOutput xmlns="urn:report">'
        + layouts_section(new_edit_group("1", layout_doc("A: B", section("S", col("f")))))
        + "</FinalOutput>"
    )

    assert list(parse_combined(xml).fields) == ["f"]


def test_transport_is_detached_from_records(sample_export):
    result = parse_combined(sample_export)
    transport = result.to_transport()

    transport["masterFieldMap"][0][1]["layouts"].clear()

    assert list(result.fields["42"].layouts) == ["newEdit", "detail"]
