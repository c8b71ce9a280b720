"""
Examples of using the httpcharsets library

This file demonstrates the main features of httpcharsets:
1. Negotiating an Accept-Charset header
2. Sending text bodies in a chosen charset
3. Decoding responses with the declared or fallback charset
"""

import io

from httpcharsets import (
    Charsets,
    Headers,
    HttpClient,
    HttpPlainText,
    HttpPlainTextConfig,
    HttpResponse,
    MockTransport,
    UnencodableText,
)


def echo_latin1(request):
    """Answer with the request body, re-encoded as ISO-8859-1"""
    text = request.body.decode("utf-8") if request.body else "café"
    return HttpResponse(
        200,
        Headers({"Content-Type": "text/plain; charset=ISO-8859-1"}),
        io.BytesIO(text.encode("latin-1")),
    )


def example_1_accept_charset():
    """Example 1: Building the Accept-Charset header"""
    print("\n" + "=" * 60)
    print("Example 1: Accept-Charset Negotiation")
    print("=" * 60)

    config = HttpPlainTextConfig()
    config.register(Charsets.UTF_8)
    config.register("iso-8859-1", quality=0.1)
    config.register("windows-1252", quality=0.555)

    feature = HttpPlainText.prepare(config)
    print(f"\nAccept-Charset: {feature.accept_charset_header}")
    print(f"Request charset: {feature.request_charset}")


def example_2_round_trip():
    """Example 2: Sending and receiving text"""
    print("\n" + "=" * 60)
    print("Example 2: Text Round Trip")
    print("=" * 60)

    config = HttpPlainTextConfig().register(Charsets.UTF_8).register(Charsets.ISO_8859_1, quality=0.1)
    with HttpClient(MockTransport(echo_latin1), plain_text=config) as client:
        text = client.post("https://example.com/echo", "Olá, São Paulo", expect=str)
    print(f"\nSent UTF-8, received ISO-8859-1, decoded: {text}")


def example_3_unencodable():
    """Example 3: Text the send charset cannot represent"""
    print("\n" + "=" * 60)
    print("Example 3: Unencodable Text")
    print("=" * 60)

    config = HttpPlainTextConfig()
    config.send_charset = Charsets.US_ASCII
    with HttpClient(MockTransport(echo_latin1), plain_text=config) as client:
        try:
            client.post("https://example.com/echo", "naïve")
        except UnencodableText as e:
            print(f"\nRequest not sent: {e}")


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("HTTPCHARSETS LIBRARY - USAGE EXAMPLES")
    print("=" * 60)

    example_1_accept_charset()
    example_2_round_trip()
    example_3_unencodable()

    print("\n" + "=" * 60)
    print("All examples completed successfully!")
    print("=" * 60 + "\n")
