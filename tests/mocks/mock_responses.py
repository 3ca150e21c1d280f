"""
Canned SOAP payloads for testing
"""
from typing import Any, Dict


class MockSOAPResponses:
    """XML payloads and structured results returned by fake SOAP operations"""

    @staticmethod
    def get_price_result() -> Dict[str, Any]:
        """Structured GetPrice result"""
        return {"Price": "12.50", "Currency": "USD"}

    @staticmethod
    def get_price_xml() -> str:
        """GetPrice result serialized as an XML string"""
        return (
            '<PriceResult xmlns="http://example.com/stocks" source="feed-1">'
            '<Symbol>ABC</Symbol>'
            '<Price currency="USD">12.50</Price>'
            '<Currency>USD</Currency>'
            '</PriceResult>'
        )

    @staticmethod
    def get_quote_history_xml() -> str:
        """Quote history with repeated Quote elements"""
        return """
            <QuoteHistory symbol="ABC">
                <Quote>
                    <Date>2024-01-15</Date>
                    <Close>12.50</Close>
                </Quote>
                <Quote>
                    <Date>2024-01-16</Date>
                    <Close>12.75</Close>
                </Quote>
                <Quote>
                    <Date>2024-01-17</Date>
                    <Close>12.40</Close>
                </Quote>
            </QuoteHistory>
        """

    @staticmethod
    def get_case_envelope_xml() -> str:
        """Full SOAP envelope, as returned by legacy services that echo the raw response"""
        return """
            <soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/">
                <soap:Body>
                    <GetCaseResponse>
                        <Case id="soap-1">
                            <Id>soap-1</Id>
                            <Title>SOAP Case 1</Title>
                            <Status>Active</Status>
                        </Case>
                    </GetCaseResponse>
                </soap:Body>
            </soap:Envelope>
        """

    @staticmethod
    def get_malformed_xml() -> str:
        """Truncated payload"""
        return "<PriceResult><Price>12.50</PriceResult>"
