from defect_init.ir import CanonicalField, SchemaRevision
from defect_init.template.composer import (
    REPRODUCTION_STEPS_PLACEHOLDER,
    DocumentComposer,
    render_document,
)


def test_bare_mode_revised_skeleton():
    text = render_document("Defect 100")
    assert text == (
        "# Defect 100\n"
        "\n"
        "## Summary\n"
        "\n"
        "## Details\n"
        "\n"
        "## Reproduction Steps\n"
        "\n"
        "## Comments\n"
        "\n"
        "## Developer Analysis\n"
        "\n"
        "## Screenshots\n"
    )


def test_bare_mode_classic_skeleton_has_no_developer_analysis():
    doc = DocumentComposer(SchemaRevision.CLASSIC).compose("Defect 100")
    assert doc.section_names == ["Summary", "Details", "Reproduction Steps", "Comments", "Screenshots"]
    assert all(not section.lines for section in doc.sections)
    assert doc.render().splitlines()[0] == "# Defect 100"


def test_bare_mode_never_has_description():
    for revision in ("classic", "revised"):
        assert "Description" not in DocumentComposer(revision).compose("Defect 1").section_names


def test_populated_details_omit_absent_bullets():
    mapping = {
        CanonicalField.SUMMARY: "Crashes on save",
        CanonicalField.DETECTED_IN_RELEASE: "v2.1",
        CanonicalField.CREATION_DATE: "2024-01-05",
        CanonicalField.ENVIRONMENT: "staging",
    }
    doc = DocumentComposer().compose("Defect 7", mapping)
    assert doc.get_section("Summary").lines == ["Crashes on save"]
    assert doc.get_section("Details").lines == [
        "* Detected In: v2.1",
        "* Creation Date: 2024-01-05",
        "* Environment: staging",
    ]


def test_populated_details_include_optional_bullets_in_order():
    mapping = {
        CanonicalField.ENVIRONMENT: "prod",
        CanonicalField.CUSTOMER_DESIRED_RELEASE: "v3",
        CanonicalField.CREATOR_FULL_NAME: "Ada",
        CanonicalField.CREATION_DATE: "2024-02-01",
        CanonicalField.DETECTED_IN_RELEASE: "v2",
    }
    lines = DocumentComposer().compose("Defect 7", mapping).get_section("Details").lines
    assert lines == [
        "* Detected In: v2",
        "* Creation Date: 2024-02-01",
        "* Creator Full Name: Ada",
        "* Environment: prod",
        "* Customer Desired Release: v3",
    ]


def test_revised_description_is_one_bullet_per_line():
    mapping = {CanonicalField.DESCRIPTION: "Step one\nStep two"}
    lines = DocumentComposer(SchemaRevision.REVISED).compose("Defect 7", mapping).get_section("Description").lines
    assert lines == ["* Step one", "* Step two"]


def test_revised_description_handles_mixed_line_breaks():
    mapping = {CanonicalField.DESCRIPTION: "a\r\nb\rc\n\nd"}
    lines = DocumentComposer().compose("Defect 7", mapping).get_section("Description").lines
    assert lines == ["* a", "* b", "* c", "* d"]


def test_classic_description_is_single_block():
    mapping = {CanonicalField.DESCRIPTION: "Step one\nStep two"}
    lines = DocumentComposer("classic").compose("Defect 7", mapping).get_section("Description").lines
    assert lines == ["Step one\nStep two"]


def test_populated_section_order_and_placeholders():
    mapping = {CanonicalField.COMMENTS: "see `null`"}
    doc = DocumentComposer().compose("Defect 7", mapping)
    assert doc.section_names == [
        "Summary",
        "Details",
        "Description",
        "Reproduction Steps",
        "Comments",
        "Developer Analysis",
        "Screenshots",
    ]
    assert doc.get_section("Reproduction Steps").lines == [REPRODUCTION_STEPS_PLACEHOLDER]
    assert doc.get_section("Comments").lines == ["see `null`"]
    assert doc.get_section("Summary").lines == []
    assert doc.get_section("Developer Analysis").lines == []
    assert doc.get_section("Screenshots").lines == []


def test_populated_render_classic_text():
    mapping = {
        CanonicalField.TITLE: "Defect 9",
        CanonicalField.SUMMARY: "Crashes on save",
        CanonicalField.DETECTED_IN_RELEASE: "v2.1",
        CanonicalField.CREATION_DATE: "2024-01-05",
        CanonicalField.ENVIRONMENT: "staging",
        CanonicalField.DESCRIPTION: "It crashes",
        CanonicalField.COMMENTS: "Seen twice",
    }
    assert render_document("Defect 9", mapping, revision="classic") == (
        "# Defect 9\n"
        "\n"
        "## Summary\n"
        "Crashes on save\n"
        "\n"
        "## Details\n"
        "* Detected In: v2.1\n"
        "* Creation Date: 2024-01-05\n"
        "* Environment: staging\n"
        "\n"
        "## Description\n"
        "It crashes\n"
        "\n"
        "## Reproduction Steps\n"
        "**TODO**: Pull Reproduction Steps from the Description section\n"
        "\n"
        "## Comments\n"
        "Seen twice\n"
        "\n"
        "## Screenshots\n"
    )


def test_empty_mapping_is_still_populated_mode():
    doc = DocumentComposer().compose("Defect 7", {})
    assert "Description" in doc.section_names
    assert doc.get_section("Details").lines == []


def test_blank_optional_cells_print_no_bullet():
    mapping = {
        CanonicalField.DETECTED_IN_RELEASE: "v1",
        CanonicalField.CREATOR_FULL_NAME: "",
        CanonicalField.ENVIRONMENT: "qa",
        CanonicalField.CUSTOMER_DESIRED_RELEASE: "",
    }
    lines = DocumentComposer().compose("Defect 7", mapping).get_section("Details").lines
    assert lines == ["* Detected In: v1", "* Environment: qa"]
