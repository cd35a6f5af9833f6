from parsing.identity import extract_email, extract_location, extract_name, extract_phone


def test_email_is_lowercased():
    assert extract_email("Contact: John.Doe@EXAMPLE.com for details") == "john.doe@example.com"
    assert extract_email("no address here") is None


def test_phone_keeps_last_ten_digits():
    assert extract_phone("Phone: +91 98765-43210") == "9876543210"
    assert extract_phone("Mobile: 9876543210") == "9876543210"
    assert extract_phone("Call 12345") is None


def test_location_from_city_list():
    assert extract_location("Backend developer based in Bengaluru", "") == "Bengaluru"


def test_location_from_label():
    text = "Jane Doe\nLocation: Austin, Texas\n"
    assert extract_location(text, text) == "Austin, Texas"


def test_location_from_preposition():
    text = "Software engineer based in Springfield"
    assert extract_location(text, text) == "Springfield"


def test_location_rejects_tool_names():
    text = "Experienced in Python and Docker"
    assert extract_location(text, text) is None


def test_name_from_header_line():
    header = "JANE DOE\nData Engineer\njane.doe@example.com"
    assert extract_name(header, header, "jane.doe@example.com") == "Jane Doe"


def test_name_suffix_is_stripped():
    header = "Jane Doe | Data Engineer\nPune"
    assert extract_name(header, header, None) == "Jane Doe"


def test_job_title_is_not_a_name():
    header = "Senior Software Engineer\nPython developer"
    assert extract_name(header, header, None) is None


def test_name_from_label():
    text = "Curriculum Vitae\nName: Arjun Mehta\nPhone: 9876543210"
    assert extract_name(text, text, None) == "Arjun Mehta"


def test_name_from_email():
    header = "resume\nphone: 98765 43210"
    assert extract_name(header, header, "priya.nair92@gmail.com") == "Priya Nair"


LONG_HEADER = "\n".join(f"Ref {100200 + i}" for i in range(8)) + "\nKavya Iyer\nChennai"


def test_name_from_email_overlap_past_first_lines():
    assert extract_name(LONG_HEADER, LONG_HEADER, "kavyaiyer92@example.com") == "Kavya Iyer"
    assert extract_name(LONG_HEADER, LONG_HEADER, "hr@example.com") is None


def test_name_from_long_first_line():
    header = "MOHAMMED ABDUL RAHMAN KHAN SIDDIQUI\nHyderabad"
    assert extract_name(header, header, None) == "Mohammed Abdul Rahman Khan Siddiqui"
