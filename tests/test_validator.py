"""Tests for yesno.utils.validator.check_dialogue_document."""

from yesno.utils.validator import check_dialogue_document


def _valid_document():
    return {
        "ask": "Do you know X?",
        "on_yes": {
            "ask": "Do you like it?",
            "on_yes": {"stop": "Good!"},
            "on_no": {"stop": "I can't believe it!"},
        },
        "on_no": {"stop": "What a pity!"},
    }


class TestCheckDialogueDocument:
    def test_valid_document_has_no_issues(self):
        assert check_dialogue_document(_valid_document()) == []

    def test_single_stop_is_valid(self):
        assert check_dialogue_document({"stop": "Done."}) == []

    def test_non_mapping_root(self):
        issues = check_dialogue_document(["ask", "stop"])
        assert len(issues) == 1
        assert issues[0].startswith("root: expected a mapping")

    def test_empty_document(self):
        issues = check_dialogue_document(None)
        assert "got NoneType" in issues[0]

    def test_neither_ask_nor_stop(self):
        issues = check_dialogue_document({"question": "Q?"})
        assert issues == ["root: node must have exactly one of 'ask' or 'stop'."]

    def test_both_ask_and_stop(self):
        issues = check_dialogue_document({"ask": "Q?", "stop": "x"})
        assert "exactly one of" in issues[0]

    def test_missing_branches_reported_with_path(self):
        doc = _valid_document()
        del doc["on_yes"]["on_no"]
        assert check_dialogue_document(doc) == ["root.on_yes: missing 'on_no'."]

    def test_all_issues_collected(self):
        doc = {"ask": "Q?", "on_yes": {"stop": 3}, "on_no": "nope"}
        issues = check_dialogue_document(doc)
        assert len(issues) == 2
        assert issues[0].startswith("root.on_yes: conclusion must be a string")
        assert issues[1].startswith("root.on_no: expected a mapping")

    def test_boolean_conclusion_suggests_quoting(self):
        issues = check_dialogue_document({"stop": False})
        assert "got bool" in issues[0]
        assert "quote" in issues[0]

    def test_bare_yes_no_keys_hint(self):
        doc = {"ask": "Q?", True: {"stop": "a"}, False: {"stop": "b"}}
        issues = check_dialogue_document(doc)
        assert len(issues) == 2
        assert "use 'on_yes'/'on_no'" in issues[0]

    def test_cycle_detected(self):
        doc = {"ask": "Again?", "on_no": {"stop": "Bye."}}
        doc["on_yes"] = doc
        issues = check_dialogue_document(doc)
        assert issues == ["root.on_yes: circular reference to an enclosing node."]

    def test_shared_subdocument_is_not_a_cycle(self):
        shared = {"stop": "Same."}
        doc = {"ask": "Q?", "on_yes": shared, "on_no": shared}
        assert check_dialogue_document(doc) == []

    def test_deep_document_is_valid(self):
        doc = {"stop": "bottom"}
        for i in range(3000):
            doc = {"ask": f"q{i}", "on_yes": doc, "on_no": {"stop": "out"}}
        assert check_dialogue_document(doc) == []

    def test_deep_issue_reports_full_path(self):
        doc = {"stop": 42}
        for i in range(1500):
            doc = {"ask": f"q{i}", "on_yes": doc, "on_no": {"stop": "out"}}
        issues = check_dialogue_document(doc)
        assert len(issues) == 1
        assert issues[0].startswith("root" + ".on_yes" * 1500 + ": conclusion must be a string")

    def test_deep_cycle_detected(self):
        top = {"ask": "top", "on_no": {"stop": "out"}}
        doc = top
        for i in range(1500):
            child = {"ask": f"q{i}", "on_no": {"stop": "out"}}
            doc["on_yes"] = child
            doc = child
        doc["on_yes"] = top
        issues = check_dialogue_document(top)
        assert len(issues) == 1
        assert issues[0].endswith("circular reference to an enclosing node.")

    def test_unknown_keys_warn(self, capsys):
        doc = {"stop": "Done.", "note": "ignored"}
        assert check_dialogue_document(doc) == []
        assert "ignoring unknown keys ['note']" in capsys.readouterr().err
