"""Small tools: regex find and replace in files, shape, string and number helpers,
threaded jobs, AES encryption, RGBA grayscale, line charts, HTTP fetching and
fixed-reply TCP/HTTP servers."""

__version__ = "1.0.0"