import unittest

from daily_crossword.data.word_tables import WordTables
from daily_crossword.io.web import create_app


class CrosswordEndpointTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.app = create_app(WordTables.load())
        cls.app.config["TESTING"] = True

    def setUp(self) -> None:
        self.client = self.app.test_client()

    def test_get_crossword(self) -> None:
        response = self.client.get("/api/crossword?lang=en&difficulty=easy&date=2024-01-01")
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data["difficulty"], "easy")
        self.assertEqual(data["date"], "2024-01-01")
        self.assertEqual(data["number"], 1)
        self.assertEqual((data["width"], data["height"]), (10, 10))
        self.assertEqual(len(data["grid"]), 10)

    def test_defaults_without_parameters(self) -> None:
        response = self.client.get("/api/crossword")
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data["difficulty"], "normal")
        self.assertEqual(data["language"], "en")
        self.assertIn("date", data)

    def test_unknown_language_and_difficulty_fall_back(self) -> None:
        data = self.client.get("/api/crossword?lang=tlh&difficulty=legendary&date=2024-03-01").get_json()
        self.assertEqual(data["language"], "en")
        self.assertEqual(data["difficulty"], "normal")

    def test_invalid_date_is_bad_request(self) -> None:
        response = self.client.get("/api/crossword?date=not-a-date")
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.get_json())

    def test_repeated_requests_are_identical(self) -> None:
        url = "/api/crossword?lang=it&difficulty=hard&date=2024-06-02"
        first = self.client.get(url).data
        second = self.client.get(url).data
        self.assertEqual(first, second)

    def test_post_not_allowed(self) -> None:
        self.assertEqual(self.client.post("/api/crossword").status_code, 405)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
