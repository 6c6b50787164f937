"""Tests for streaming and discrete input judges."""

from core.input_judge import DiscreteJudge, StreamingJudge
from core.word_ledger import WordLedger, WordStatus

A = WordStatus.ACTIVE
C = WordStatus.CORRECT
X = WordStatus.INCORRECT
P = WordStatus.PENDING


class TestStreamingJudge:
    """Test whole-buffer evaluation."""

    def test_in_progress_prefix_stays_active(self):
        ledger = WordLedger(["cat", "dog"])
        judge = StreamingJudge(ledger)

        outcome = judge.evaluate("ca")

        assert ledger.statuses == [A, P]
        assert outcome.committed == []
        assert judge.cursor == 0

    def test_boundary_commits_word(self):
        ledger = WordLedger(["cat", "dog"])
        judge = StreamingJudge(ledger)

        outcome = judge.evaluate("cat ")

        assert ledger.statuses == [C, A]
        assert len(outcome.committed) == 1
        assert outcome.committed[0].correct
        assert outcome.committed[0].target == "cat"
        assert judge.cursor == 1

    def test_newline_is_boundary(self):
        ledger = WordLedger(["cat", "dog"])
        judge = StreamingJudge(ledger)

        judge.evaluate("cat\n")

        assert ledger.statuses == [C, A]

    def test_tab_is_boundary(self):
        ledger = WordLedger(["cat", "dog"])
        judge = StreamingJudge(ledger)

        outcome = judge.evaluate("cat\t")

        assert ledger.statuses == [C, A]
        assert len(outcome.committed) == 1

    def test_diverged_prefix_is_incorrect_before_commit(self):
        ledger = WordLedger(["dog", "cat"])
        judge = StreamingJudge(ledger)

        outcome = judge.evaluate("di")

        assert ledger.statuses == [X, P]
        assert outcome.committed == []

    def test_wrong_word_committed_incorrect(self):
        ledger = WordLedger(["dog", "cat"])
        judge = StreamingJudge(ledger)

        outcome = judge.evaluate("dig ")

        assert ledger.statuses == [X, A]
        assert len(outcome.committed) == 1
        assert not outcome.committed[0].correct
        assert outcome.committed[0].typed == "dig"

    def test_empty_buffer_forces_first_word_active(self):
        ledger = WordLedger(["cat", "dog"])
        judge = StreamingJudge(ledger)
        judge.evaluate("cat d")

        judge.evaluate("   ")

        assert ledger.statuses == [A, P]
        assert judge.cursor == 0

    def test_word_counted_once(self):
        ledger = WordLedger(["cat", "dog", "fox"])
        judge = StreamingJudge(ledger)

        first = judge.evaluate("cat ")
        second = judge.evaluate("cat  ")
        third = judge.evaluate("cat d")

        assert len(first.committed) == 1
        assert second.committed == []
        assert third.committed == []

    def test_editing_committed_word_recolours_without_recount(self):
        ledger = WordLedger(["cat", "dog", "fox"])
        judge = StreamingJudge(ledger)
        judge.evaluate("cat ")

        judge.evaluate("ca")
        assert ledger.statuses == [A, P, P]

        outcome = judge.evaluate("cax ")
        assert ledger.statuses == [X, A, P]
        assert outcome.committed == []

    def test_several_words_in_one_event(self):
        ledger = WordLedger(["one", "two", "three"])
        judge = StreamingJudge(ledger)

        outcome = judge.evaluate("one twx th")

        assert ledger.statuses == [C, X, A]
        assert [w.correct for w in outcome.committed] == [True, False]

    def test_last_word_completes_without_boundary(self):
        ledger = WordLedger(["cat", "dog"])
        judge = StreamingJudge(ledger)
        judge.evaluate("cat ")

        outcome = judge.evaluate("cat dog")

        assert outcome.passage_complete
        assert ledger.statuses == [C, C]
        assert outcome.committed[0].index == 1

    def test_last_word_wrong_but_full_length_completes(self):
        ledger = WordLedger(["cat", "dog"])
        judge = StreamingJudge(ledger)

        outcome = judge.evaluate("cat dox")

        assert outcome.passage_complete
        assert ledger.statuses == [C, X]

    def test_last_word_short_does_not_complete(self):
        ledger = WordLedger(["cat", "dog"])
        judge = StreamingJudge(ledger)

        outcome = judge.evaluate("cat do")

        assert not outcome.passage_complete
        assert ledger.statuses == [C, A]

    def test_extra_words_beyond_passage_ignored(self):
        ledger = WordLedger(["cat"])
        judge = StreamingJudge(ledger)

        outcome = judge.evaluate("cat dog bird ")

        assert outcome.passage_complete
        assert len(outcome.committed) == 1

    def test_empty_ledger(self):
        judge = StreamingJudge(WordLedger([]))
        outcome = judge.evaluate("anything ")
        assert outcome.committed == []
        assert not outcome.passage_complete


class TestDiscreteJudge:
    """Test per-word judging."""

    def test_partial_input_active_then_incorrect(self):
        ledger = WordLedger(["dog", "cat"])
        judge = DiscreteJudge(ledger)

        judge.update_partial("do")
        assert ledger.status_at(0) == A

        judge.update_partial("dx")
        assert ledger.status_at(0) == X

        judge.update_partial("d")
        assert ledger.status_at(0) == A

    def test_commit_correct_advances(self):
        ledger = WordLedger(["dog", "cat", "fox"])
        judge = DiscreteJudge(ledger)

        outcome = judge.commit("dog")

        assert ledger.statuses == [C, A, P]
        assert judge.cursor == 1
        assert outcome.committed[0].correct
        assert not outcome.passage_complete

    def test_commit_incorrect(self):
        ledger = WordLedger(["dog", "cat"])
        judge = DiscreteJudge(ledger)

        outcome = judge.commit("dig")

        assert ledger.statuses == [X, A]
        assert not outcome.committed[0].correct

    def test_empty_commit_is_ignored(self):
        ledger = WordLedger(["dog", "cat"])
        judge = DiscreteJudge(ledger)

        outcome = judge.commit("  ")

        assert outcome.committed == []
        assert judge.cursor == 0

    def test_type_char_boundary_commits_buffer(self):
        ledger = WordLedger(["dog", "cat", "fox"])
        judge = DiscreteJudge(ledger)

        for ch in "dog":
            judge.type_char(ch)
        outcome = judge.type_char(" ")

        assert outcome.committed[0].typed == "dog"
        assert judge.buffer == ""
        assert ledger.statuses == [C, A, P]

    def test_type_char_tab_commits_buffer(self):
        ledger = WordLedger(["dog", "cat"])
        judge = DiscreteJudge(ledger)

        for ch in "dog":
            judge.type_char(ch)
        outcome = judge.type_char("\t")

        assert outcome.committed[0].typed == "dog"
        assert judge.buffer == ""
        assert ledger.statuses == [C, A]

    def test_backspace_fixes_typo(self):
        ledger = WordLedger(["dog", "cat"])
        judge = DiscreteJudge(ledger)

        judge.type_char("d")
        judge.type_char("i")
        assert ledger.status_at(0) == X

        judge.backspace()
        assert judge.buffer == "d"
        assert ledger.status_at(0) == A

    def test_last_word_completes_at_full_length(self):
        ledger = WordLedger(["cat", "dog"])
        judge = DiscreteJudge(ledger)
        judge.commit("cat")

        judge.update_partial("do")
        outcome = judge.update_partial("dog")

        assert outcome.passage_complete
        assert ledger.statuses == [C, C]

    def test_last_word_committed_by_boundary(self):
        ledger = WordLedger(["cat", "dog"])
        judge = DiscreteJudge(ledger)
        judge.commit("cat")

        outcome = judge.commit("do")

        assert outcome.passage_complete
        assert ledger.statuses == [C, X]


class TestModesAgree:
    """Both modes reach the same judgement for the same net input."""

    def test_same_statuses_and_commits(self):
        words = ["the", "quick", "brown", "fox"]
        typed = ["the", "quack", "brown"]

        streaming_ledger = WordLedger(words)
        streaming = StreamingJudge(streaming_ledger)
        streaming_commits = streaming.evaluate(" ".join(typed) + " ").committed

        discrete_ledger = WordLedger(words)
        discrete = DiscreteJudge(discrete_ledger)
        discrete_commits = []
        for word in typed:
            discrete_commits.extend(discrete.commit(word).committed)

        assert streaming_ledger.statuses == discrete_ledger.statuses
        assert streaming_commits == discrete_commits

    def test_same_judgement_for_typed_characters(self):
        """Tab, newline and space all end a word in both modes."""
        words = ["the", "quick", "brown", "fox"]
        keys = "the\tquack\nbrown "

        streaming_ledger = WordLedger(words)
        streaming = StreamingJudge(streaming_ledger)
        streaming_commits = []
        for end in range(1, len(keys) + 1):
            streaming_commits.extend(streaming.evaluate(keys[:end]).committed)

        discrete_ledger = WordLedger(words)
        discrete = DiscreteJudge(discrete_ledger)
        discrete_commits = []
        for ch in keys:
            discrete_commits.extend(discrete.type_char(ch).committed)

        assert streaming_ledger.statuses == [C, X, C, A]
        assert streaming_ledger.statuses == discrete_ledger.statuses
        assert streaming_commits == discrete_commits
        assert [w.typed for w in discrete_commits] == ["the", "quack", "brown"]
