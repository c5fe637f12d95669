#!/usr/bin/env python3
"""
Command-line client for a running URL shortener service.

Usage:
    python shortener_cli.py shorten <url>
    python shortener_cli.py get <short_code>
    python shortener_cli.py stats
    python shortener_cli.py health
"""

import argparse
import json
import os
import sys
from typing import Any, Dict, List, Optional

import httpx

DEFAULT_BASE_URL = "http://localhost:8080"


class ShortenerCLI:
    """Command-line client for the URL shortener API."""
    
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 5.0,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize CLI.
        
        Args:
            base_url: Base URL of the running service
            timeout: Request timeout in seconds
            client: Optional preconfigured HTTP client
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.Client(base_url=self.base_url, timeout=timeout)
    
    def close(self):
        """Close the HTTP client if this CLI created it."""
        if self._owns_client:
            self.client.close()
    
    def shorten(self, url: str) -> int:
        """Shorten a URL."""
        response = self._request("POST", "/api/shorten", json={"long_url": url})
        if response is None:
            return 1
        
        data = self._decode(response)
        if data is None:
            return 1
        if response.status_code != 201:
            return self._fail(data)
        
        return self._succeed({
            "short_code": data["short_code"],
            "short_url": data["short_url"],
            "original_url": data["original_url"],
            "message": f"Successfully shortened URL to: {data['short_code']}",
        })
    
    def get(self, short_code: str) -> int:
        """Get original URL for a short code."""
        response = self._request("GET", f"/api/urls/{short_code}")
        if response is None:
            return 1
        
        data = self._decode(response)
        if data is None:
            return 1
        if response.status_code != 200:
            return self._fail(data)
        
        return self._succeed(data)
    
    def stats(self) -> int:
        """Get service statistics."""
        response = self._request("GET", "/api/stats")
        if response is None:
            return 1
        
        data = self._decode(response)
        if data is None:
            return 1
        if response.status_code != 200:
            return self._fail(data)
        
        return self._succeed({"statistics": data})
    
    def health(self) -> int:
        """Check service health."""
        response = self._request("GET", "/api/health")
        if response is None:
            return 1
        
        data = self._decode(response)
        if data is None:
            return 1
        self._succeed({"health": data})
        return 0 if data.get("status") == "healthy" else 1
    
    def _request(self, method: str, path: str, **kwargs) -> Optional[httpx.Response]:
        try:
            return self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            self._fail({"error": "connection_error", "detail": f"{self.base_url}: {e}"})
            return None
    
    def _decode(self, response: httpx.Response) -> Optional[Dict[str, Any]]:
        """Parse a JSON object body, reporting anything else as an error."""
        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            self._fail({
                "error": "invalid_response",
                "detail": f"HTTP {response.status_code}: {response.text}",
            })
            return None
        return data

    @staticmethod
    def _succeed(payload: Dict[str, Any]) -> int:
        print(json.dumps({"success": True, **payload}, indent=2))
        return 0
    
    @staticmethod
    def _fail(payload: Dict[str, Any]) -> int:
        print(json.dumps({
            "success": False,
            "error": payload.get("error", "error"),
            "detail": payload.get("detail"),
        }, indent=2), file=sys.stderr)
        return 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="URL Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url
  
  # Get original URL
  %(prog)s get k3pQ9z
  
  # Get statistics
  %(prog)s stats
  
  # Check health
  %(prog)s health
        """
    )
    
    parser.add_argument(
        "--base-url",
        default=os.getenv("SHORTENER_URL", DEFAULT_BASE_URL),
        help=f"Service base URL (default: from SHORTENER_URL env or {DEFAULT_BASE_URL})"
    )
    
    parser.add_argument(
        "--timeout",
        type=float,
        default=5.0,
        help="Request timeout in seconds"
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")
    
    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    
    get_parser = subparsers.add_parser("get", help="Get original URL")
    get_parser.add_argument("short_code", help="Short code to lookup")
    
    subparsers.add_parser("stats", help="Get service statistics")
    subparsers.add_parser("health", help="Check service health")
    
    return parser


def main(argv: Optional[List[str]] = None, client: Optional[httpx.Client] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    cli = ShortenerCLI(base_url=args.base_url, timeout=args.timeout, client=client)
    
    try:
        if args.command == "shorten":
            return cli.shorten(args.url)
        elif args.command == "get":
            return cli.get(args.short_code)
        elif args.command == "stats":
            return cli.stats()
        elif args.command == "health":
            return cli.health()
        else:
            parser.print_help()
            return 1
    finally:
        cli.close()


if __name__ == "__main__":
    sys.exit(main())
