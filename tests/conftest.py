import xml.etree.ElementTree as ET

import pytest

from tests.xml_builders import (
    col,
    db_field,
    dependents,
    detail_group,
    fields_section,
    final_output,
    history_group,
    layout_doc,
    layouts_section,
    new_edit_group,
    option,
    section,
    visibility,
)


@pytest.fixture
def sample_export():
    """A combined export touching every registry."""
    new_edit = layout_doc(
        "Employee Central: HR Admin",
        '<control CardName="1"><property name="CardName" value="Personal"/></control>'
        '<button id="btnApprove" iscustom="1" caption="Approve"/>'
        '<button id="btnSave" iscustom="0" caption="Save"/>'
        + section(
            "Personal Data",
            col("cust_42", label="Badge", req="1",
                extra=dependents(option("Y", "cust_43", "44"))),
            col("firstName", label="First Name", readonly="1",
                extra=visibility("Admin,Manager")),
            col("blankcell"),
        ),
    )
    detail = layout_doc(
        "Employee Central: Manager",
        section(
            "Detail Section",
            col("cust_42", label="Badge (detail)", hide="1",
                extra=dependents(option("Y", "44", "45"), option("N", "46"))),
            col("lastName", name="Last Name"),
        ),
    )
    history = layout_doc(
        "Employee Central: Employee",
        section("History", col("firstName", label="First", extra=visibility("Employee"))),
    )
    schema = fields_section(
        db_field("42", LABEL="Badge", FieldType="TEXT", LENGTH="10",
                 TABLENAME="EMP", FIELDNAME="BADGE", LOVS="A, B,C"),
        db_field("firstName", LABEL="First Name", TABLENAME="EMP", FIELDNAME="FNAME"),
    )
    return final_output(
        layouts_section(
            new_edit_group("10", new_edit),
            detail_group("20", detail),
            history_group("30", history),
        ),
        schema,
    )


@pytest.fixture
def layout_root(sample_export):
    return ET.fromstring(sample_export).find("Layouts/Layouts")
