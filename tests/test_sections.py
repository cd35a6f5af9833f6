from parsing.sections import header_slice, section_body, split_sections

SAMPLE = """Jane Doe
jane@example.com

Summary
Data engineer who likes tidy pipelines.

Work Experience
Data Engineer at Acme
2019 - 2022

Education Details
B.Sc in Statistics, Pune University, 2018

Skills & Tools
Python, Airflow, Spark

Academic Projects
Churn Model: gradient boosting on telecom data
"""


def test_header_slice():
    assert header_slice(SAMPLE, 8) == "Jane Doe"
    assert header_slice(None) == ""


def test_section_bodies():
    assert section_body(SAMPLE, "experience") == "Data Engineer at Acme\n2019 - 2022"
    assert section_body(SAMPLE, "education") == "B.Sc in Statistics, Pune University, 2018"
    assert section_body(SAMPLE, "skills") == "Python, Airflow, Spark"
    assert section_body(SAMPLE, "projects") == "Churn Model: gradient boosting on telecom data"
    assert section_body(SAMPLE, "summary") == "Data engineer who likes tidy pipelines."


def test_missing_section_is_none():
    assert section_body(SAMPLE, "certifications") is None
    assert "certifications" not in split_sections(SAMPLE)


def test_label_with_number_is_not_a_heading():
    text = "Experience: 5 years\n\nWORK EXPERIENCE\nAcme Corp\n\nEDUCATION\nMIT"
    assert section_body(text, "experience") == "Acme Corp"


def test_body_is_capped():
    text = "SKILLS\n" + "Python, " * 1000
    assert len(section_body(text, "skills", limit=50)) <= 50


def test_section_is_pure():
    assert split_sections(SAMPLE) == split_sections(SAMPLE)
