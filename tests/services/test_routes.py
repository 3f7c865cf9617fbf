"""HTTP route tests — chart view, Sonolus items, error envelope, health."""


async def test_liveness(client):
    response = await client.get("/api/v1/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_chart_view_embeds_public_variants(client, seed_charts):
    response = await client.get("/api/v1/charts/root")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "root"
    assert [v["name"] for v in body["variants"]] == ["root-v1"]
    assert body["variants"][0]["variants"] == []
    assert body["chart"] == {
        "hash": "root-chart", "url": "https://cdn.example.com/root/chart",
    }
    assert body["liked"] is False
    assert body["variantOf"] is None


async def test_chart_view_without_variants_or_resources(client, seed_charts):
    response = await client.get(
        "/api/v1/charts/root",
        params={"with_variants": "false", "with_resources": "false"},
    )
    body = response.json()
    assert body["variants"] == []
    assert body["cover"] is None
    assert body["chart"] is None


async def test_private_chart_withholds_notation(client, seed_charts):
    body = (await client.get("/api/v1/charts/hidden")).json()
    assert body["chart"] is None
    assert body["publishedAt"] is None


async def test_unknown_chart_returns_error_envelope(client, seed_charts):
    response = await client.get("/api/v1/charts/missing")
    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "CHART_NOT_FOUND"
    assert error["context"]["chart_name"] == "missing"


async def test_sonolus_level_by_prefixed_name(client, seed_charts):
    response = await client.get("/sonolus/levels/chcy-root")
    assert response.status_code == 200
    body = response.json()
    assert body["description"] == "The original"
    item = body["item"]
    assert item["name"] == "chcy-root"
    assert item["author"] == "Ann#ann"
    assert item["source"] == "cc.example.com"
    assert item["tags"][0] == {"title": "1", "icon": "heart"}
    assert item["useBackground"]["item"]["name"] == "chcy-bg-root-v3"


async def test_sonolus_level_localized(client, seed_charts):
    item = (
        await client.get("/sonolus/levels/chcy-root", params={"localization": "ja"})
    ).json()["item"]
    assert {"title": "J-POP・ポップス"} in item["tags"]


async def test_sonolus_level_unknown(client, seed_charts):
    response = await client.get("/sonolus/levels/chcy-missing")
    assert response.status_code == 404


async def test_random_levels_only_listed_charts(client, seed_charts):
    response = await client.get("/sonolus/levels/random", params={"count": 10})
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    names = sorted(item["name"] for item in body["items"])
    assert names == ["chcy-meme-1", "chcy-meme-2", "chcy-root"]


async def test_random_levels_by_genre(client, seed_charts):
    response = await client.get(
        "/sonolus/levels/random", params={"count": 5, "genres": ["meme"]},
    )
    body = response.json()
    assert body["total"] == 2
    assert {item["name"] for item in body["items"]} == {"chcy-meme-1", "chcy-meme-2"}


async def test_random_levels_rejects_bad_count(client, seed_charts):
    response = await client.get("/sonolus/levels/random", params={"count": 0})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_background_item(client, seed_charts):
    response = await client.get("/sonolus/backgrounds/chcy-bg-root-v3")
    assert response.status_code == 200
    item = response.json()["item"]
    assert item["name"] == "chcy-bg-root-v3"
    assert item["image"]["hash"] == "root-background_v3"


async def test_background_v1_falls_back_to_generate_endpoint(client, seed_charts):
    item = (await client.get("/sonolus/backgrounds/chcy-bg-root-v1")).json()["item"]
    assert item["image"]["hash"] == ""
    assert item["image"]["url"].startswith("/sonolus/generate-asset?chart=root")


async def test_background_invalid_name(client, seed_charts):
    for name in ("root", "chcy-bg-root-v9", "chcy-bg-root"):
        response = await client.get(f"/sonolus/backgrounds/{name}")
        assert response.status_code == 404
