# upload_smoke.py
import os
import sys
import requests

UPLOAD_HOST = os.getenv("UPLOAD_HOST", "http://localhost:8000")

if len(sys.argv) != 2:
    sys.exit("usage: python upload_smoke.py <image-file>")

path = sys.argv[1]
url = f"{UPLOAD_HOST}/api/upload-avatar"

try:
    print(f"Uploading {path} to {url}...")
    with open(path, "rb") as fh:
        response = requests.post(url, files={"avatar": (os.path.basename(path), fh)})

    # Raise an exception if the upload was rejected (400, 405, 500)
    response.raise_for_status()

    image_url = response.json()["imageUrl"]
    print("✅ Upload accepted.")
    print(f"Stored at: {UPLOAD_HOST}{image_url}")

except requests.exceptions.RequestException as e:
    print("❌ Upload failed.")
    if e.response is not None:
        print(f"Status Code: {e.response.status_code}")
        print(f"Response: {e.response.text}")
    else:
        print(f"Error: {e}")
    sys.exit(1)
