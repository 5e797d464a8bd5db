def test_all_default_pairs(client):
    resp = client.get('/api/v1/ltp')
    assert resp.status_code == 200
    assert resp.get_json() == {"ltp": [
        {"pair": "BTC/USD", "amount": 45000.0},
        {"pair": "BTC/CHF", "amount": 41000.0},
        {"pair": "BTC/EUR", "amount": 42000.0},
    ]}


def test_single_pair(client):
    resp = client.get('/api/v1/ltp?pair=btc/usd')
    assert resp.status_code == 200
    assert resp.get_json() == {"ltp": [{"pair": "BTC/USD", "amount": 45000.0}]}


def test_pair_takes_precedence_over_pairs(client):
    resp = client.get('/api/v1/ltp?pair=BTC/EUR&pairs=BTC/USD,BTC/CHF')
    assert [e["pair"] for e in resp.get_json()["ltp"]] == ["BTC/EUR"]


def test_multiple_pairs(client):
    resp = client.get('/api/v1/ltp?pairs=BTC/USD,BTC/EUR')
    assert resp.status_code == 200
    assert [e["pair"] for e in resp.get_json()["ltp"]] == ["BTC/USD", "BTC/EUR"]


def test_partial_failure_returns_successful_subset(client):
    resp = client.get('/api/v1/ltp?pairs=BTC/USD,INVALID')
    assert resp.status_code == 200
    assert resp.get_json() == {"ltp": [{"pair": "BTC/USD", "amount": 45000.0}]}


def test_total_failure_is_500_plain_text(client):
    resp = client.get('/api/v1/ltp?pairs=INVALID,ALSO/BAD')
    assert resp.status_code == 500
    assert resp.mimetype == 'text/plain'
    assert resp.get_data(as_text=True) == 'Error fetching LTP: failed to fetch any LTP data'


def test_non_get_is_405(client, kraken):
    for url in ('/api/v1/ltp', '/api/v1/ltp?pair=BTC/USD'):
        for method in ('POST', 'PUT', 'DELETE', 'PATCH', 'OPTIONS'):
            resp = client.open(url, method=method)
            assert resp.status_code == 405, method
            assert resp.get_data(as_text=True) == 'Method not allowed'
        assert client.head(url).status_code == 405
    assert kraken.calls == []


def test_health(client, kraken):
    kraken.prices.clear()
    resp = client.get('/health')
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == 'OK'


def test_cached_between_requests(client, kraken):
    client.get('/api/v1/ltp?pair=BTC/USD')
    client.get('/api/v1/ltp?pair=BTC/USD')
    assert kraken.calls == ["XXBTZUSD"]
