"""
DynamoDB setup and management utilities.
Provides table creation, deletion, and health monitoring for the passwords table.
"""
import sys
import time
import argparse
from typing import List, Dict, Any
from botocore.exceptions import ClientError
from passgen.infrastructure.config.aws_config import aws_config
from passgen.infrastructure.config.infrastructure_settings import infra_settings
from passgen.infrastructure.logging.log_decorators import (
    log_infrastructure_operation,
    op_config
)
from .table_schemas import TableSchemas, SEARCH_HASH_INDEX


class DynamoDBSetup:
    """
    Manages DynamoDB table creation and setup operations.
    """

    def __init__(self, dynamodb=None):
        self.dynamodb = dynamodb if dynamodb is not None else aws_config.dynamodb_resource
        self.schemas = TableSchemas()

    @log_infrastructure_operation("create_passwords_table", **op_config())
    def create_passwords_table(self) -> Dict[str, Any]:
        """
        Create the passwords table with its search hash GSI.

        Returns:
            Dict with creation result and table details
        """
        table_name = infra_settings.passwords_table_name

        try:
            if self.table_exists(table_name):
                existing_table = self.dynamodb.Table(table_name)
                existing_table.load()

                if self.has_search_hash_gsi(existing_table):
                    return {
                        'success': True,
                        'table_name': table_name,
                        'action': 'skipped',
                        'reason': 'table_exists_with_gsi'
                    }
                return {
                    'success': False,
                    'table_name': table_name,
                    'action': 'failed',
                    'reason': 'missing_search_hash_gsi',
                    'recommendation': 'recreate_table'
                }

            schema = self.schemas.passwords_table_schema(table_name)
            table = self.dynamodb.create_table(**schema)

            self.wait_for_table_creation(table)

            return {
                'success': True,
                'table_name': table_name,
                'action': 'created',
                'gsi_count': len(table.global_secondary_indexes or [])
            }

        except ClientError as e:
            error_code = e.response['Error']['Code']
            error_message = e.response['Error']['Message']
            raise RuntimeError(f"Failed to create table '{table_name}': {error_code} - {error_message}") from e

    def has_search_hash_gsi(self, table) -> bool:
        """
        Check if table has the search hash GSI.

        Args:
            table: DynamoDB table resource

        Returns:
            True if the GSI exists, False otherwise
        """
        for gsi in getattr(table, 'global_secondary_indexes', None) or []:
            if gsi['IndexName'] == SEARCH_HASH_INDEX:
                return True
        return False

    def table_exists(self, table_name: str) -> bool:
        """
        Check if a table exists in DynamoDB.

        Args:
            table_name: Name of the table to check

        Returns:
            True if table exists, False otherwise
        """
        try:
            table = self.dynamodb.Table(table_name)
            table.load()  # Raises if the table doesn't exist
            return True
        except ClientError as e:
            if e.response['Error']['Code'] == 'ResourceNotFoundException':
                return False
            raise

    @log_infrastructure_operation("wait_table_creation", **op_config())
    def wait_for_table_creation(self, table, max_wait_time: int = 600) -> Dict[str, Any]:
        """
        Wait for a table to be created and become active, including all GSIs.

        Args:
            table: DynamoDB table resource
            max_wait_time: Maximum time to wait in seconds

        Returns:
            Dict with waiting results
        """
        start_time = time.time()

        while time.time() - start_time < max_wait_time:
            try:
                table.reload()
                if table.table_status == 'ACTIVE' and self.are_indexes_active(table):
                    return {
                        'success': True,
                        'table_name': table.name,
                        'table_status': table.table_status,
                        'total_wait_time_seconds': round(time.time() - start_time, 2)
                    }
            except ClientError:
                # Table still being created
                pass
            time.sleep(5)

        raise TimeoutError(f"Table creation timed out after {max_wait_time} seconds")

    def are_indexes_active(self, table) -> bool:
        """Check if all Global Secondary Indexes are active."""
        for index in getattr(table, 'global_secondary_indexes', None) or []:
            if index['IndexStatus'] != 'ACTIVE':
                return False
        return True

    @log_infrastructure_operation("delete_table", **op_config("CRITICAL"))
    def delete_table(self, table_name: str) -> Dict[str, Any]:
        """
        Delete a table (useful for testing and cleanup).

        Args:
            table_name: Name of the table to delete

        Returns:
            Dict with deletion results
        """
        try:
            if not self.table_exists(table_name):
                return {
                    'success': True,
                    'table_name': table_name,
                    'action': 'skipped',
                    'reason': 'table_does_not_exist'
                }

            self.dynamodb.Table(table_name).delete()

            return {
                'success': True,
                'table_name': table_name,
                'action': 'deleted'
            }

        except ClientError as e:
            error_code = e.response['Error']['Code']
            error_message = e.response['Error']['Message']
            raise RuntimeError(f"Failed to delete table '{table_name}': {error_code} - {error_message}") from e

    def list_tables(self) -> List[str]:
        """
        List all tables in the DynamoDB instance.

        Returns:
            List of table names
        """
        return [table.name for table in self.dynamodb.tables.all()]

    def get_table_info(self, table_name: str) -> Dict[str, Any]:
        """
        Get information about a table including GSI info.

        Args:
            table_name: Name of the table

        Returns:
            Dictionary with table information
        """
        if not self.table_exists(table_name):
            return {'exists': False, 'table_name': table_name}

        table = self.dynamodb.Table(table_name)
        table.load()

        return {
            'exists': True,
            'table_name': table_name,
            'status': table.table_status,
            'item_count': table.item_count,
            'gsi_count': len(table.global_secondary_indexes or []),
            'has_search_hash_gsi': self.has_search_hash_gsi(table)
        }

    @log_infrastructure_operation("health_check", **op_config())
    def health_check(self) -> Dict[str, Any]:
        """
        Perform health check on the DynamoDB setup.

        Returns:
            Dictionary with health check results
        """
        results = {
            'dynamodb_connection': False,
            'table_count': 0,
            'endpoint': infra_settings.dynamodb_endpoint_url or 'AWS Default',
            'passwords_table': {}
        }

        tables = self.list_tables()
        results['dynamodb_connection'] = True
        results['table_count'] = len(tables)
        results['passwords_table'] = self.get_table_info(infra_settings.passwords_table_name)

        return results


def main():
    """Entry point for CLI operations on DynamoDB setup."""
    parser = argparse.ArgumentParser(description="passgen DynamoDB setup utility")
    parser.add_argument("--health", action="store_true", help="Run health check")
    parser.add_argument("--create", action="store_true", help="Create the passwords table")
    parser.add_argument("--delete", metavar="TABLE", help="Delete a specific table by name")
    parser.add_argument("--list", action="store_true", help="List all tables")
    parser.add_argument("--info", metavar="TABLE", help="Get info for a specific table")
    args = parser.parse_args()

    setup = DynamoDBSetup()
    try:
        if args.health:
            result = setup.health_check()
            success = result.get("dynamodb_connection", False)
        elif args.create:
            result = setup.create_passwords_table()
            success = result["success"]
        elif args.delete:
            result = setup.delete_table(args.delete)
            success = result.get("success", False)
        elif args.list:
            result = setup.list_tables()
            success = True
        elif args.info:
            result = setup.get_table_info(args.info)
            success = result.get("exists", False)
        else:
            parser.print_help()
            return 1
        print(result)
        return 0 if success else 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
