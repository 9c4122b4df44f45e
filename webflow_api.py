import requests


class WebflowClient:
    def __init__(self, token, base_url="https://api.webflow.com", timeout=30):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {self.token}",
            "accept-version": "1.0.0",
            "Content-Type": "application/json"
        }

    def fetch_page(self, collection_id, limit=100, offset=0, sort=None):
        """Fetch one page of collection items"""
        url = f"{self.base_url}/collections/{collection_id}/items"
        params = {"limit": limit, "offset": offset}
        if sort:
            params["sort[]"] = list(sort)

        response = requests.get(url, headers=self.headers, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def patch_record(self, collection_id, record_id, fields, live=True):
        """Update some fields of a collection item"""
        url = f"{self.base_url}/collections/{collection_id}/items/{record_id}"
        params = {"live": "true"} if live else {}
        payload = {"fields": fields}

        response = requests.patch(url, headers=self.headers, params=params, json=payload,
                                  timeout=self.timeout)
        response.raise_for_status()
        return response.json()
