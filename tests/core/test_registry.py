"""
Unit tests for the calculator registry.
"""
import unittest

from calctech.projects.registry import (
    PROJECTS,
    get_all_projects,
    get_calculators,
    get_children_of_category,
    get_homepage_items,
    get_project_by_id,
)


class TestRegistry(unittest.TestCase):

    def test_ids_are_unique(self):
        ids = [p['id'] for p in PROJECTS]
        self.assertEqual(len(ids), len(set(ids)))

    def test_every_calculator_has_a_category_parent(self):
        categories = {p['id'] for p in PROJECTS if p['type'] == 'category'}
        for calc in get_calculators():
            self.assertIn(calc['parent'], categories, calc['id'])

    def test_required_keys(self):
        for project in PROJECTS:
            for key in ('id', 'name', 'description', 'url', 'type', 'order'):
                self.assertIn(key, project, project.get('id'))

    def test_only_known_keys(self):
        allowed = {'id', 'name', 'description', 'url', 'type', 'parent', 'icon', 'order'}
        for project in PROJECTS:
            self.assertLessEqual(set(project), allowed, project['id'])

    def test_all_projects_are_listed(self):
        self.assertEqual(len(get_all_projects()), len(PROJECTS))

    def test_homepage_lists_categories_with_counts(self):
        items = get_homepage_items()
        self.assertTrue(all(item['type'] == 'category' for item in items))
        finance = next(item for item in items if item['id'] == 'finance')
        self.assertEqual(finance['count'], 35)

    def test_items_sorted_by_order(self):
        orders = [item['order'] for item in get_homepage_items()]
        self.assertEqual(orders, sorted(orders))

    def test_category_children(self):
        children = get_children_of_category('health')
        self.assertEqual([c['id'] for c in children][:2], ['bmi', 'bmr'])

    def test_filter_by_category(self):
        self.assertEqual(
            [c['id'] for c in get_calculators('education')], ['grade', 'gpa'])

    def test_unknown_id(self):
        self.assertIsNone(get_project_by_id('nope'))


if __name__ == "__main__":
    unittest.main()
