from barstock.services.availability import analyze, build_report, names_match, normalize_name

from conftest import make_inventory, make_recipe


def test_normalize_name():
    assert normalize_name("  Lime Juice ") == "lime juice"
    assert normalize_name(None) is None


def test_names_match_ignores_case_and_whitespace():
    assert names_match(" Lime Juice ", "lime juice")
    assert not names_match("Lime juice", "Lime")
    assert not names_match("Limes", "Lime")


def test_missing_names_never_match():
    assert not names_match(None, None)
    assert not names_match(None, "gin")
    assert not names_match("gin", None)


def test_scenario_full():
    inventory = make_inventory("White rum", "Lime juice", "Sugar", "Mint leaves", "Soda water")
    recipe = make_recipe("Mojito", "White rum", "Lime juice", "Sugar", "Mint leaves", "Soda water")
    report = build_report(recipe, inventory)
    assert report.availability == "full"
    assert report.missing_count == 0
    assert report.percentage_available == 100
    assert report.recipe is recipe


def test_scenario_partial():
    inventory = make_inventory("Tequila", "Triple sec", "Lime juice")
    recipe = make_recipe("Margarita", "Tequila", "Triple sec", "Lime juice", "Salt")
    report = build_report(recipe, inventory)
    assert report.availability == "partial"
    assert report.missing_ingredients == ("Salt",)
    assert report.available_ingredients == ("Tequila", "Triple sec", "Lime juice")
    assert report.percentage_available == 75


def test_scenario_none():
    inventory = make_inventory("Vodka", "Gin")
    recipe = make_recipe("Old Fashioned", "Bourbon", "Sugar cube", "Angostura bitters", "Orange twist")
    report = build_report(recipe, inventory)
    assert report.availability == "none"
    assert report.percentage_available == 0
    assert report.missing_count == report.total_ingredients == 4


def test_empty_recipe_is_never_full():
    report = build_report(make_recipe("Air"), make_inventory("Gin"))
    assert report.availability == "none"
    assert report.percentage_available == 0
    assert report.missing_count == 0
    assert report.total_ingredients == 0


def test_empty_inventory():
    report = build_report(make_recipe("Gimlet", "Gin", "Lime juice"), [])
    assert report.availability == "none"
    assert report.missing_ingredients == ("Gin", "Lime juice")


def test_match_is_case_and_whitespace_insensitive():
    report = build_report(make_recipe("Gimlet", "lime juice", "GIN"), make_inventory(" Lime Juice ", "gin"))
    assert report.availability == "full"
    assert report.available_ingredients == ("lime juice", "GIN")


def test_one_item_satisfies_repeated_lines():
    report = build_report(make_recipe("Double", "Gin", "gin"), make_inventory("Gin"))
    assert report.availability == "full"
    assert report.available_ingredients == ("Gin", "gin")


def test_null_names_are_missing_and_do_not_raise():
    inventory = make_inventory(None, "Gin")
    report = build_report(make_recipe("Mystery", None, "Gin"), inventory)
    assert report.availability == "partial"
    assert report.missing_ingredients == (None,)
    assert report.available_ingredients == ("Gin",)


def test_partition_preserves_recipe_order():
    recipe = make_recipe("Mix", "a", "b", "c", "d", "e")
    report = build_report(recipe, make_inventory("d", "b"))
    assert report.available_ingredients == ("b", "d")
    assert report.missing_ingredients == ("a", "c", "e")


def test_percentage_rounds_half_up():
    recipe = make_recipe("Eight", "a", "b", "c", "d", "e", "f", "g", "h")
    assert build_report(recipe, make_inventory("a")).percentage_available == 13
    assert build_report(make_recipe("Three", "a", "b", "c"), make_inventory("a", "b")).percentage_available == 67
    assert build_report(make_recipe("Three", "a", "b", "c"), make_inventory("a")).percentage_available == 33


def test_volumes_do_not_affect_matching():
    inventory = make_inventory("Gin")
    empty = [item.model_copy(update={"volume_remaining": 0}) for item in inventory]
    assert build_report(make_recipe("Neat", "Gin"), empty).availability == "full"


def test_analyze_keeps_input_order(inventory, recipes):
    reports = analyze(recipes, inventory)
    assert [r.recipe.name for r in reports] == [r.name for r in recipes]
    assert [r.availability for r in reports] == ["full", "partial", "none", "partial", "partial"]
    assert [r.percentage_available for r in reports] == [100, 75, 0, 33, 67]


def test_report_invariants(inventory, recipes):
    recipes = recipes + [make_recipe("Air"), make_recipe("Nulls", None, "Gin", None)]
    for report in analyze(recipes, inventory):
        assert report.missing_count + len(report.available_ingredients) == report.total_ingredients
        assert len(report.missing_ingredients) == report.missing_count
        assert 0 <= report.percentage_available <= 100
        is_full = report.missing_count == 0 and report.total_ingredients > 0
        assert (report.availability == "full") == is_full
        assert (report.availability == "none") == (report.missing_count == report.total_ingredients)
        if report.total_ingredients > 0:
            assert (report.percentage_available == 100) == (report.missing_count == 0)


def test_analyze_does_not_mutate_inputs(inventory, recipes):
    before = [r.model_dump() for r in recipes]
    analyze(recipes, inventory)
    assert [r.model_dump() for r in recipes] == before
