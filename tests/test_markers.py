"""Tests for reply marker parsing."""

from goal_assistant.dialogue.markers import (
    GoalMarker,
    NoMarker,
    PlanMarker,
    QuestionMarker,
    extract_follow_up_questions,
    parse_reply_marker,
)


class TestParseReplyMarker:
    """Tests for parse_reply_marker()."""

    def test_goal_marker(self):
        """Test goal text is taken up to the next line break."""
        reply = "Step 1: Goal Identification\nGoal identified: run a marathon\nGreat choice!"
        assert parse_reply_marker(reply) == GoalMarker("run a marathon")

    def test_question_marker(self):
        """Test question text is extracted and trimmed."""
        reply = "Step 2: Generating Questions\nQuestion:   How often do you run?  \nTake your time."
        assert parse_reply_marker(reply) == QuestionMarker("How often do you run?")

    def test_question_marker_at_end_of_reply(self):
        """Test extraction when no line break follows the marker."""
        assert parse_reply_marker("Question: Why?") == QuestionMarker("Why?")

    def test_carriage_return_is_trimmed(self):
        """Test CRLF replies do not leak a trailing carriage return."""
        assert parse_reply_marker("Question: Why?\r\nMore") == QuestionMarker("Why?")

    def test_plan_marker_keeps_whole_reply(self):
        """Test the plan variant carries the full reply verbatim."""
        reply = "Step 4: Generate Action Plan\n## Action Plan:\n1. Run 3x a week"
        assert parse_reply_marker(reply) == PlanMarker(reply)

    def test_no_marker(self):
        """Test a plain reply yields NoMarker."""
        assert parse_reply_marker("What would you like to achieve?") == NoMarker()

    def test_goal_wins_over_question(self):
        """Test goal is checked before question regardless of position."""
        reply = "Question: How often?\nGoal identified: run a marathon\n"
        assert parse_reply_marker(reply) == GoalMarker("run a marathon")

    def test_question_wins_over_plan(self):
        """Test question is checked before the plan marker."""
        reply = "Action Plan: soon\nQuestion: How often?\n"
        assert parse_reply_marker(reply) == QuestionMarker("How often?")

    def test_first_occurrence_is_used(self):
        """Test extraction uses the first occurrence of the marker."""
        reply = "Question: first\nQuestion: second\n"
        assert parse_reply_marker(reply) == QuestionMarker("first")

    def test_markers_are_case_sensitive(self):
        """Test that lower-case markers are not recognised."""
        assert parse_reply_marker("goal identified: x\nquestion: y") == NoMarker()


class TestExtractFollowUpQuestions:
    """Tests for extract_follow_up_questions()."""

    def test_collects_question_lines(self):
        """Test bullets, numbering and emphasis are stripped."""
        reply = (
            "Action Plan:\n"
            "1. Run three times a week.\n"
            "- Would you like a weekly schedule?\n"
            "2. **How will you track your progress?**\n"
            "You can do it!"
        )
        assert extract_follow_up_questions(reply) == [
            "Would you like a weekly schedule?",
            "How will you track your progress?",
        ]

    def test_skips_marker_lines_and_duplicates(self):
        """Test question-marker lines and repeats are dropped."""
        reply = "Question: Is this one?\n* Any more?\n* Any more?\n"
        assert extract_follow_up_questions(reply) == ["Any more?"]

    def test_no_questions(self):
        """Test a plan without questions yields an empty list."""
        assert extract_follow_up_questions("Action Plan:\n1. Go") == []
