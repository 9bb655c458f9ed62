UPLOAD_URL_REQUEST_URL = "/api/objects/upload"
UPLOAD_URL = "/objects/uploads/{object_id}"
HOST_PICTURE_URL = "/api/host-pictures"
PRIVATE_OBJECT_URL = "/objects/{object_path:path}"
PUBLIC_OBJECT_URL = "/public-objects/{file_path:path}"
