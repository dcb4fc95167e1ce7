"""Tests for workout CRUD and the stats endpoint."""


class TestWorkoutCrud:
    def test_create_get_delete_lifecycle(self, client):
        res = client.post("/workouts", json={"userId": "u1", "name": "Leg Day", "date": "2024-01-01", "exercises": []})
        assert res.status_code == 201
        created = res.json()
        assert created["exercises"] == []
        assert created["userId"] == "u1"
        assert "revision" not in created

        wid = created["_id"]
        res = client.get(f"/workouts/{wid}")
        assert res.status_code == 200
        assert res.json() == created

        res = client.delete(f"/workouts/{wid}")
        assert res.status_code == 200
        assert res.json() == {"success": True}

        res = client.delete(f"/workouts/{wid}")
        assert res.status_code == 404
        assert client.get(f"/workouts/{wid}").status_code == 404

    def test_exercise_order_is_kept(self, client, leg_day):
        created = client.post("/workouts", json=leg_day).json()
        assert [e["exercise"] for e in created["exercises"]] == ["Squat", "Lunge"]
        assert created["exercises"][0] == {"exercise": "Squat", "sets": 3, "reps": 10, "weight": 100}

    def test_list_by_user(self, client, leg_day):
        client.post("/workouts", json=leg_day)
        client.post("/workouts", json={**leg_day, "name": "Push Day"})
        client.post("/workouts", json={**leg_day, "userId": "u2"})

        res = client.get("/workouts", params={"userId": "u1"})
        assert res.status_code == 200
        assert sorted(w["name"] for w in res.json()) == ["Leg Day", "Push Day"]

        assert client.get("/workouts", params={"userId": "nobody"}).json() == []

    def test_list_requires_user_id(self, client):
        res = client.get("/workouts")
        assert res.status_code == 400
        assert res.json()["errors"][0]["path"] == ".query.userId"

    def test_create_missing_name_is_400(self, client):
        res = client.post("/workouts", json={"userId": "u1", "date": "2024-01-01"})
        assert res.status_code == 400
        assert ".body.name" in [e["path"] for e in res.json()["errors"]]

    def test_create_bad_date_is_400(self, client):
        res = client.post("/workouts", json={"userId": "u1", "name": "X", "date": "yesterday"})
        assert res.status_code == 400

    def test_partial_update(self, client, leg_day):
        created = client.post("/workouts", json=leg_day).json()
        res = client.put(f"/workouts/{created['_id']}", json={"name": "Heavy Leg Day"})
        assert res.status_code == 200
        updated = res.json()
        assert updated["name"] == "Heavy Leg Day"
        assert updated["date"] == "2024-01-01"
        assert updated["exercises"] == created["exercises"]

    def test_update_replaces_exercises(self, client, leg_day):
        created = client.post("/workouts", json=leg_day).json()
        new_exercises = [{"exercise": "Deadlift", "sets": 5, "reps": 5, "weight": 140}]
        updated = client.put(f"/workouts/{created['_id']}", json={"exercises": new_exercises}).json()
        assert updated["exercises"] == new_exercises

    def test_update_rejects_null_name(self, client, leg_day):
        created = client.post("/workouts", json=leg_day).json()
        res = client.put(f"/workouts/{created['_id']}", json={"name": None})
        assert res.status_code == 400

    def test_update_missing_is_404(self, client):
        res = client.put("/workouts/does-not-exist", json={"name": "X"})
        assert res.status_code == 404


class TestWorkoutStatsEndpoint:
    def test_stats(self, client, leg_day, estimator):
        estimator.reply = "About 320 calories"
        wid = client.post("/workouts", json=leg_day).json()["_id"]
        res = client.get(f"/workouts/{wid}/stats")
        assert res.status_code == 200
        stats = res.json()
        assert stats["workoutId"] == wid
        assert stats["date"] == "2024-01-01"
        assert stats["totalExercises"] == 2
        assert stats["totalSets"] == 5
        assert stats["totalReps"] == 46
        assert stats["totalWeight"] == 3800
        assert stats["intensity"] == "Medium"
        assert stats["averageWeightPerExercise"] == 1900
        assert stats["caloriesBurned"] == 320

    def test_stats_missing_is_404(self, client):
        assert client.get("/workouts/nope/stats").status_code == 404
