APPLICATION_JSON = "application/json"
APPLICATION_OCTET_STREAM = "application/octet-stream"
MULTIPART_FORM_DATA = "multipart/form-data"
TEXT_PLAIN = "text/plain"
ANY_MEDIA_TYPE = "*/*"

ACCEPT_HEADER = "Accept"
CONTENT_TYPE_HEADER = "Content-Type"

# Key of the call parameters holding caller-supplied headers
HEADERS_PARAM = "headers"

# Companion parameter carrying the content type of the uploaded document
FILE_CONTENT_TYPE_PARAM = "file_content_type"

# Accept value used by ``get_translated_document`` when none is given
TRANSLATED_DOCUMENT_DEFAULT_ACCEPT = "application/powerpoint"

# Method suffix -> negotiated media type of the translated document
TRANSLATED_DOCUMENT_VARIANTS = {
    "mspowerpoint": "application/mspowerpoint",
    "x_rtf": "application/x-rtf",
    "json": "application/json",
    "xml": "application/xml",
    "vnd_ms_excel": "application/vnd.ms-excel",
    "vnd_openxmlformats_officedocument_spreadsheetml_sheet": (
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    ),
    "vnd_ms_powerpoint": "application/vnd.ms-powerpoint",
    "vnd_openxmlformats_officedocument_presentationml_presentation": (
        "application/vnd.openxmlformats-officedocument.presentationml.presentation"
    ),
    "msword": "application/msword",
    "vnd_openxmlformats_officedocument_wordprocessingml_document": (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    ),
    "vnd_oasis_opendocument_spreadsheet": "application/vnd.oasis.opendocument.spreadsheet",
    "vnd_oasis_opendocument_presentation": (
        "application/vnd.oasis.opendocument.presentation"
    ),
    "vnd_oasis_opendocument_text": "application/vnd.oasis.opendocument.text",
    "pdf": "application/pdf",
    "rtf": "application/rtf",
    "html": "text/html",
    "text_json": "text/json",
    "plain": "text/plain",
    "richtext": "text/richtext",
    "text_rtf": "text/rtf",
    "text_xml": "text/xml",
}
