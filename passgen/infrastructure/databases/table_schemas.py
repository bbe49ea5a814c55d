"""
DynamoDB table schema definitions for passgen.
"""
from typing import Dict, Any


SEARCH_HASH_INDEX = 'search-hash-index'


class TableSchemas:
    """
    Centralized DynamoDB table schema definitions.

    Design principles:
    - Plaintext passwords are never stored, only bcrypt hashes
    - A lossy search hash GSI narrows lookups to a few candidates
    - Uniqueness of plaintexts is checked by the application, not the table
    """

    @staticmethod
    def passwords_table_schema(table_name: str) -> Dict[str, Any]:
        """
        Passwords table schema with the search hash GSI.

        Structure:
        - password_id (PK): UUID string assigned on insert
        - verification_hash: bcrypt hash of the password
        - search_hash: binary digest of the first third of the password (indexed)
        - complexity: LOW | MEDIUM | HIGH | ULTRA
        - created_at: ISO timestamp of password generation

        GSI Indexes:
        1. search-hash-index: candidate lookup by search hash

        Args:
            table_name: Name for the DynamoDB table

        Returns:
            DynamoDB table creation schema dictionary
        """
        return {
            'TableName': table_name,
            'KeySchema': [
                {
                    'AttributeName': 'password_id',
                    'KeyType': 'HASH'  # Partition key
                }
            ],
            'AttributeDefinitions': [
                {
                    'AttributeName': 'password_id',
                    'AttributeType': 'S'
                },
                {
                    'AttributeName': 'search_hash',
                    'AttributeType': 'B'  # Binary digest for the GSI
                }
            ],
            'GlobalSecondaryIndexes': [
                {
                    'IndexName': SEARCH_HASH_INDEX,
                    'KeySchema': [
                        {
                            'AttributeName': 'search_hash',
                            'KeyType': 'HASH'
                        }
                    ],
                    'Projection': {
                        'ProjectionType': 'ALL'  # Candidates need the verification hash
                    }
                }
            ],
            'BillingMode': 'PAY_PER_REQUEST',
            'SSESpecification': {
                'Enabled': True  # Encryption at rest
            },
            'Tags': [
                {
                    'Key': 'Project',
                    'Value': 'passgen'
                },
                {
                    'Key': 'TableType',
                    'Value': 'Passwords'
                }
            ]
        }

    @classmethod
    def get_all_schemas(cls, passwords_table_name: str = 'passgen-passwords') -> Dict[str, Dict[str, Any]]:
        """
        Get all table schemas for batch operations.

        Returns:
            Dictionary mapping table types to their schemas
        """
        return {
            'passwords': cls.passwords_table_schema(passwords_table_name)
        }

    @classmethod
    def validate_schema(cls, schema: Dict[str, Any]) -> bool:
        """
        Validate that a schema has required DynamoDB fields.

        Args:
            schema: DynamoDB table schema to validate

        Returns:
            True if schema is valid, False otherwise
        """
        required_fields = ['TableName', 'KeySchema', 'AttributeDefinitions']

        for field in required_fields:
            if field not in schema:
                return False

        if not schema['KeySchema']:
            return False

        # Key attributes of the table and its GSIs must all be defined
        key_attributes = {key['AttributeName'] for key in schema['KeySchema']}
        defined_attributes = {attr['AttributeName'] for attr in schema['AttributeDefinitions']}

        for gsi in schema.get('GlobalSecondaryIndexes', []):
            key_attributes.update(key['AttributeName'] for key in gsi['KeySchema'])

        return key_attributes.issubset(defined_attributes)
