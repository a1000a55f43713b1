import io

import pytest

from contact_book.cli.menu import ConsoleInput, MenuChoice, MenuLoop, MenuState
from contact_book.core.store import PeopleStore
from contact_book.exceptions import PersistenceError
from contact_book.storage.people_file import PeopleFile

from .conftest import make_person, output_of


def build_menu(console, tmp_path, script, people=(), capacity=1000):
    store = PeopleStore(people, capacity=capacity)
    people_file = PeopleFile(tmp_path / "people.txt")
    reader = ConsoleInput(console, io.StringIO(script))
    return MenuLoop(store, people_file, console, reader=reader, show_summary=False)


def test_menu_choices_are_numbered_like_the_menu_line():
    assert [c.value for c in MenuChoice] == [1, 2, 3, 4, 5]


def test_console_input_keeps_first_token_and_skips_blank_lines(console):
    reader = ConsoleInput(console, io.StringIO("\n   \nMary Ann Smith\n"))
    assert reader.read_token("Enter first name: ") == "Mary"


def test_console_input_raises_on_end_of_input(console):
    reader = ConsoleInput(console, io.StringIO(""))
    with pytest.raises(EOFError):
        reader.read_token("Your choice: ")


def test_add_then_exit_saves(console, tmp_path):
    menu = build_menu(console, tmp_path, "1\nAnn\nLee\n555\n30\n5\n")
    assert menu.run() == 0

    out = output_of(console)
    assert "Person added successfully" in out
    assert "Goodbye!" in out
    assert (tmp_path / "people.txt").read_text(encoding="utf-8") == "Ann Lee 555 30\n"
    assert menu.stats.people_added == 1
    assert menu.stats.saved


def test_add_truncates_fields_at_whitespace(console, tmp_path):
    menu = build_menu(console, tmp_path, "1\nMary Jane\nWatson Parker\n555 1234\n30 years\n5\n")
    menu.run()
    assert menu.store.snapshot() == [make_person("Mary", "Watson", "555", 30)]


def test_add_reprompts_for_non_numeric_age(console, tmp_path):
    menu = build_menu(console, tmp_path, "1\nAnn\nLee\n555\nthirty\n30\n5\n")
    menu.run()
    assert "Invalid input, please enter a number" in output_of(console)
    assert menu.store.snapshot() == [make_person()]


def test_add_when_full_is_refused_without_prompting(console, tmp_path):
    menu = build_menu(console, tmp_path, "1\n5\n", people=[make_person()], capacity=1)
    menu.run()
    out = output_of(console)
    assert "List is full" in out
    assert "Enter first name" not in out
    assert len(menu.store) == 1


def test_non_numeric_menu_input_is_discarded(console, tmp_path):
    menu = build_menu(console, tmp_path, "abc def 1\n5\n")
    menu.run()
    out = output_of(console)
    assert out.count("Invalid input, please enter a number") == 1
    # the trailing "1" on the bad line must not start an Add
    assert "Enter first name" not in out
    assert "Goodbye!" in out


def test_out_of_range_menu_choice(console, tmp_path):
    menu = build_menu(console, tmp_path, "9\n0\n5\n")
    menu.run()
    assert output_of(console).count("Invalid choice") == 2
    assert menu.stats.rejected_inputs == 2


def test_step_returns_exit_state(console, tmp_path):
    menu = build_menu(console, tmp_path, "4\n5\n")
    assert menu.step() is MenuState.MAIN_MENU
    assert menu.step() is MenuState.EXIT


def test_list_empty_and_populated(console, tmp_path):
    menu = build_menu(console, tmp_path, "4\n5\n")
    menu.run()
    assert "No people found" in output_of(console)

    console.file.truncate(0)
    console.file.seek(0)
    menu = build_menu(
        console, tmp_path, "4\n5\n", people=[make_person(), make_person("Bob", "Ray")]
    )
    menu.run()
    out = output_of(console)
    assert "Ann Lee" in out
    assert "Bob Ray" in out
    assert "No people found" not in out


def test_search_on_empty_store(console, tmp_path):
    menu = build_menu(console, tmp_path, "3\n5\n")
    menu.run()
    out = output_of(console)
    assert "No people to search" in out
    assert "Enter first name to search" not in out


def test_search_not_found(console, tmp_path):
    menu = build_menu(console, tmp_path, "3\nBob\n5\n", people=[make_person()])
    menu.run()
    assert "No person found with that name" in output_of(console)


def test_search_shows_matches(console, tmp_path):
    people = [make_person("Ann", "Lee"), make_person("Bob", "Ray"), make_person("Ann", "Kim")]
    menu = build_menu(console, tmp_path, "3\nAnn\n5\n", people=people)
    menu.run()
    out = output_of(console)
    assert "Search Results" in out
    assert "Ann Lee" in out
    assert "Ann Kim" in out
    assert "Bob Ray" not in out


def test_delete_selected_duplicate(console, tmp_path):
    people = [make_person("Ann", "Lee", "555", 30), make_person("Ann", "Kim", "556", 40)]
    menu = build_menu(console, tmp_path, "2\nAnn\n2\n5\n", people=people)
    menu.run()
    assert "Choose a person to delete (1-2)" in output_of(console)
    assert "Person deleted successfully" in output_of(console)
    assert menu.store.snapshot() == [make_person("Ann", "Lee", "555", 30)]
    assert (tmp_path / "people.txt").read_text(encoding="utf-8") == "Ann Lee 555 30\n"


@pytest.mark.parametrize("selection", ["3", "0", "two"])
def test_delete_invalid_selection_leaves_store(console, tmp_path, selection):
    people = [make_person("Ann", "Lee"), make_person("Ann", "Kim")]
    menu = build_menu(console, tmp_path, f"2\nAnn\n{selection}\n5\n", people=people)
    menu.run()
    assert "Invalid choice" in output_of(console)
    assert menu.store.snapshot() == people
    assert menu.stats.people_deleted == 0


def test_delete_unknown_name(console, tmp_path):
    menu = build_menu(console, tmp_path, "2\nZed\n5\n", people=[make_person()])
    menu.run()
    out = output_of(console)
    assert "No person found with that name" in out
    assert "Choose a person" not in out


def test_delete_on_empty_store(console, tmp_path):
    menu = build_menu(console, tmp_path, "2\n5\n")
    menu.run()
    assert "No people to delete" in output_of(console)


def test_end_of_input_does_not_save(console, tmp_path):
    menu = build_menu(console, tmp_path, "1\nAnn\nLee\n555\n30\n")
    assert menu.run() == 0
    assert "Session ended without saving" in output_of(console)
    assert not (tmp_path / "people.txt").exists()
    assert not menu.stats.saved


def test_save_failure_is_reported_and_memory_kept(console, tmp_path, monkeypatch):
    menu = build_menu(console, tmp_path, "1\nAnn\nLee\n555\n30\n5\n")

    def failing_save(people):
        raise PersistenceError("Error opening file 'people.txt' for writing")

    monkeypatch.setattr(menu.people_file, "save", failing_save)
    assert menu.run() == 0

    out = output_of(console)
    assert "Error opening file" in out
    assert "Goodbye!" in out
    assert menu.store.snapshot() == [make_person()]
    assert not menu.stats.saved


def test_summary_printed_on_exit(console, tmp_path):
    menu = build_menu(console, tmp_path, "1\nAnn\nLee\n555\n30\n5\n")
    menu.show_summary = True
    menu.run()
    out = output_of(console)
    assert "Saved" in out
    assert "People Now:" in out


def test_end_of_input_mentions_discarded_changes(console, tmp_path):
    menu = build_menu(console, tmp_path, "1\nAnn\nLee\n555\n30\n")
    menu.run()
    assert "Unsaved changes were discarded" in output_of(console)

    console.file.truncate(0)
    console.file.seek(0)
    menu = build_menu(console, tmp_path, "4\n")
    menu.run()
    assert "Unsaved changes were discarded" not in output_of(console)


def test_names_with_markup_survive_debug_logging(console, tmp_path, rich_log):
    script = (
        "1\n[/b]\nLee\n555\n30\n"  # add
        "2\n[/b]\n1\n"  # delete it again
        "1\n[/b]\nKim\n556\n40\n"  # add another
        "5\n"
    )
    menu = build_menu(console, tmp_path, script)
    assert menu.run() == 0
    saved = (tmp_path / "people.txt").read_text(encoding="utf-8")
    assert saved == "[/b] Kim 556 40\n"
    assert "[/b] Lee" in output_of(rich_log)


def test_non_ascii_digit_is_not_a_menu_choice(console, tmp_path):
    menu = build_menu(console, tmp_path, "٥\n5\n")
    menu.run()
    out = output_of(console)
    assert "Invalid input, please enter a number" in out
    assert out.count("Goodbye!") == 1


def test_summary_counts_listings(console, tmp_path):
    menu = build_menu(console, tmp_path, "4\n4\n5\n")
    menu.show_summary = True
    menu.run()
    assert "Listings:" in output_of(console)
    assert menu.stats.listings == 2
