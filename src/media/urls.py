UPLOAD_URL = "/api/v1/uploads"
