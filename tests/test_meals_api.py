"""Tests for meal CRUD and the stats endpoint."""


class TestMealCrud:
    def test_create_get_delete_lifecycle(self, client, breakfast):
        res = client.post("/meals", json=breakfast)
        assert res.status_code == 201
        created = res.json()
        assert created["name"] == "Breakfast"
        assert [f["food"] for f in created["foods"]] == ["Oatmeal", "Blueberries"]

        mid = created["_id"]
        assert client.get(f"/meals/{mid}").json() == created

        assert client.delete(f"/meals/{mid}").json() == {"success": True}
        assert client.delete(f"/meals/{mid}").status_code == 404

    def test_empty_foods(self, client):
        res = client.post("/meals", json={"userId": "u1", "name": "Snack", "date": "2024-03-20"})
        assert res.status_code == 201
        assert res.json()["foods"] == []
        assert res.json()["description"] is None

    def test_list_by_user(self, client, breakfast):
        client.post("/meals", json=breakfast)
        client.post("/meals", json={**breakfast, "userId": "u2", "name": "Dinner"})
        meals = client.get("/meals", params={"userId": "u2"}).json()
        assert [m["name"] for m in meals] == ["Dinner"]

    def test_negative_calories_rejected(self, client, breakfast):
        breakfast["foods"][0]["calories"] = -5
        res = client.post("/meals", json=breakfast)
        assert res.status_code == 400
        assert ".body.foods[0].calories" in [e["path"] for e in res.json()["errors"]]

    def test_update(self, client, breakfast):
        mid = client.post("/meals", json=breakfast).json()["_id"]
        res = client.put(f"/meals/{mid}", json={"description": "Overnight oats", "date": "2024-03-21"})
        assert res.status_code == 200
        assert res.json()["description"] == "Overnight oats"
        assert res.json()["date"] == "2024-03-21"
        assert len(res.json()["foods"]) == 2

    def test_get_missing_is_404(self, client):
        res = client.get("/meals/missing")
        assert res.status_code == 404
        assert res.json() == {"message": "Meal not found"}


class TestMealStatsEndpoint:
    def test_stats_uses_estimate(self, client, breakfast, estimator):
        estimator.reply = "420"
        mid = client.post("/meals", json=breakfast).json()["_id"]
        stats = client.get(f"/meals/{mid}/stats").json()
        assert stats == {"mealId": mid, "date": "2024-03-20", "totalCalories": 350, "calories": 420}

    def test_stats_missing_is_404(self, client):
        assert client.get("/meals/missing/stats").status_code == 404
