from __future__ import annotations

from services.document_parser import extract_links, parse_companies, split_technologies


def test_well_formed_block_round_trip():
    doc = "\n".join([
        "|Acme",
        "|Dhaka",
        "|A, B, C",
        "|http://x.com[Website]",
    ])
    companies = parse_companies(doc)
    assert len(companies) == 1
    acme = companies[0]
    assert acme.name == "Acme"
    assert acme.location == "Dhaka"
    assert acme.technologies == ["A", "B", "C"]
    assert [(l.url, l.label) for l in acme.links] == [("http://x.com", "Website")]


def test_multiline_location_is_space_joined():
    doc = "\n".join([
        "|Acme",
        "|House 12, Road 5,",
        "   Dhanmondi,   ",
        "Dhaka 1205",
        "|Python",
        "|https://acme.example[Website]",
    ])
    [acme] = parse_companies(doc)
    assert acme.location == "House 12, Road 5, Dhanmondi, Dhaka 1205"
    assert acme.technologies == ["Python"]


def test_single_line_with_two_links_keeps_order():
    doc = "\n".join([
        "|Acme",
        "|Dhaka",
        "|Go",
        "|https://acme.example[Website] https://facebook.com/acme[Facebook]",
    ])
    [acme] = parse_companies(doc)
    assert [(l.url, l.label) for l in acme.links] == [
        ("https://acme.example", "Website"),
        ("https://facebook.com/acme", "Facebook"),
    ]


def test_links_on_undelimited_lines_belong_to_current_block():
    doc = "\n".join([
        "|Acme",
        "|Dhaka",
        "|Go",
        "|https://acme.example[Website]",
        "https://linkedin.com/company/acme[LinkedIn]",
        "|Beta",
        "|Sylhet",
        "|Rust",
    ])
    acme, beta = parse_companies(doc)
    assert [l.label for l in acme.links] == ["Website", "LinkedIn"]
    assert beta.name == "Beta"
    assert beta.links == []


def test_nameless_block_dropped_and_parsing_continues():
    doc = "\n".join([
        "|   ",
        "|Nowhere",
        "|Go",
        "|https://nameless.example[Website]",
        "|Beta",
        "|Sylhet",
        "|Rust, Go",
        "|https://beta.example[Website]",
    ])
    companies = parse_companies(doc)
    assert [c.name for c in companies] == ["Beta"]
    assert companies[0].technologies == ["Rust", "Go"]


def test_incomplete_trailing_block_is_discarded():
    doc = "\n".join([
        "|Acme",
        "|Dhaka",
        "|Go",
        "|Half Finished Ltd",
        "|Chattogram",
    ])
    companies = parse_companies(doc)
    assert [c.name for c in companies] == ["Acme"]


def test_separator_header_and_prose_are_ignored(sample_document):
    companies = parse_companies(sample_document)
    assert [c.name for c in companies] == ["Brain Station 23", "Cefalo", "Anchorblock Technology"]
    brain = companies[0]
    assert brain.location == "Plot 02, Bir Uttam A.K. Khandakar Road, Mohakhali C/A, Dhaka 1212"
    assert [l.label for l in brain.links] == ["Website", "Facebook", "LinkedIn"]
    # Closing separator ends the last block; trailing prose links are not attached
    anchor = companies[2]
    assert anchor.technologies == ["Go", "React", "Node.js"]
    assert anchor.links == []


def test_embedded_delimiters_stay_in_cell_text():
    doc = "\n".join([
        "|Foo | Bar Ltd",
        "|Level 3 | Block B",
        "|C#, F#",
    ])
    [company] = parse_companies(doc)
    assert company.name == "Foo | Bar Ltd"
    assert company.location == "Level 3 | Block B"
    assert company.technologies == ["C#", "F#"]


def test_empty_or_garbage_input_yields_no_records():
    assert parse_companies("") == []
    assert parse_companies(None) == []
    assert parse_companies("just some text\nwithout any table\n") == []
    assert parse_companies("|===\n|===\n") == []


def test_parse_is_deterministic(sample_document):
    first = parse_companies(sample_document)
    second = parse_companies(sample_document)
    assert first == second
    assert first[0] is not second[0]


def test_extract_links_ignores_unmatched_text():
    links = extract_links("see www.acme.example or https://acme.example[Home] and [x]")
    assert [(l.url, l.label) for l in links] == [("https://acme.example", "Home")]


def test_split_technologies_trims_and_drops_empty():
    assert split_technologies(" Go ,, React ,  ") == ["Go", "React"]
